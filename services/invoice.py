"""
Invoice Parsing Service

Extracts candidate ingredient/price line items from OCR'd supplier invoices.
Results are best-effort and meant for review before anything is saved.
"""

import re
import uuid

from constants import (
    INVOICE_SKIP_WORDS,
    SKIP_WORD_MAX_LINE_LENGTH,
    MIN_LINE_PRICE,
    MAX_LINE_PRICE,
    MIN_ITEM_NAME_LENGTH,
    KG_PRICE_THRESHOLD,
    DEFAULT_UNIT,
)
from .cost import safe_float
from .units import normalize_unit

# Price at end of line: "Item $12.50", "Item | 12.50", "Item     12"
PRICE_PATTERN = re.compile(r'\$?\s*(\d+\.?\d*)\s*$')
# Quantity at start of the name: "2 Roma Tomatoes"
QTY_PATTERN = re.compile(r'^(\d+\.?\d*)\s+')


def _is_header_line(line):
    """Short lines mentioning a header/summary word (Total, Qty, Date...)."""
    if len(line) >= SKIP_WORD_MAX_LINE_LENGTH:
        return False
    lowered = line.lower()
    return any(word in lowered for word in INVOICE_SKIP_WORDS)


def clean_item_name(name):
    """Replace stray OCR symbols with spaces and collapse whitespace."""
    name = re.sub(r"[^\w\s&'-]", ' ', name)
    name = re.sub(r'\s+', ' ', name)
    return name.strip()


def parse_invoice_line(line):
    """
    Parse one invoice line into a line item.

    Returns:
        dict with id, name, price, originalLine, or None if the line is not an item
    """
    line = line.strip()
    if not line or _is_header_line(line):
        return None

    price_match = PRICE_PATTERN.search(line)
    if not price_match:
        return None

    price = float(price_match.group(1))
    # Too large is likely a total, too small is noise
    if price > MAX_LINE_PRICE or price < MIN_LINE_PRICE:
        return None

    name = line[:price_match.start()].strip()
    qty_match = QTY_PATTERN.match(name)
    if qty_match:
        name = name[qty_match.end():].strip()

    name = clean_item_name(name)
    if len(name) < MIN_ITEM_NAME_LENGTH or name.isdigit():
        return None

    return {
        'id': uuid.uuid4().hex,
        'name': name,
        'price': price,
        'originalLine': line,
    }


def parse_invoice_text(text):
    """Extract candidate line items from raw OCR text, one per matching line."""
    items = []
    for line in (text or '').splitlines():
        item = parse_invoice_line(line)
        if item:
            items.append(item)
    return items


def infer_unit(price):
    """
    Guess the pricing unit of an invoice line from its price alone.

    Rough heuristic: prices above 10 are assumed to be per kg, anything
    else per gram.
    """
    if safe_float(price) > KG_PRICE_THRESHOLD:
        return 'kg'
    return DEFAULT_UNIT


def line_items_to_ingredients(items, edits=None):
    """
    Promote approved invoice line items into ingredient entries.

    Each item becomes one entry with quantity 1 and its price as unit cost.
    `edits` maps item id -> {name, price, unit} overrides from the review step.

    Returns:
        list of ingredient entry dicts
    """
    edits = edits or {}
    ingredients = []
    for item in items:
        edited = edits.get(item.get('id')) or {}
        name = clean_item_name(str(edited.get('name') or item.get('name') or ''))
        if not name:
            continue
        price = safe_float(edited.get('price', item.get('price')))
        unit = normalize_unit(edited.get('unit')) or infer_unit(price)
        ingredients.append({
            'name': name,
            'unit_cost': price,
            'quantity': 1,
            'unit': unit,
            'package_cost': None,
            'package_size': None,
            'package_unit': None,
        })
    return ingredients
