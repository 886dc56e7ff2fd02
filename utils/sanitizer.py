"""
Input Sanitization Module

Cleans user-supplied names and descriptions before they are stored.
"""

import re

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')
_HEX_COLOR = re.compile(r'^#[0-9a-fA-F]{6}$')


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text (descriptions, notes).

    Strips control characters except newlines and tabs, and truncates.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, empty if nothing is left
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]', '', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_name(name, max_length=200):
    """
    Sanitize a dish, ingredient, template, category or menu name.

    Args:
        name: The name to sanitize
        max_length: Maximum allowed length (default 200)

    Returns:
        Sanitized name, empty string if nothing is left
    """
    if not name:
        return ''

    if not isinstance(name, str):
        name = str(name)

    # Remove control characters and null bytes
    name = _CONTROL_CHARS.sub('', name)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length - 3] + '...'

    return name


def sanitize_color(color, default):
    """Return `color` if it is a #RRGGBB hex string, otherwise `default`."""
    if isinstance(color, str) and _HEX_COLOR.match(color.strip()):
        return color.strip()
    return default
