"""
Validation Constants

Contains whitelist values for validating user input before it is persisted.
"""

from .units import UNIT_MAPPINGS

# Units accepted on ingredient and template writes (aliases included)
VALID_UNITS = set(UNIT_MAPPINGS)

# Maximum field lengths
MAX_LENGTHS = {
    'dish_name': 200,
    'ingredient_name': 200,
    'template_name': 200,
    'category_name': 100,
    'menu_name': 200,
    'description': 2000,
}

DEFAULT_CATEGORY_COLOR = '#9333EA'

# Allowed invoice image extensions (PDF support is not available)
ALLOWED_INVOICE_EXTENSIONS = {'png', 'jpg', 'jpeg'}

# Largest id or display order SQLite can store (signed 64-bit INTEGER)
MAX_DB_INTEGER = 2 ** 63 - 1
