"""
Invoice Constants

Heuristic thresholds for extracting line items from OCR'd supplier invoices.
"""

# Header/summary words; a short line containing one is not a line item
INVOICE_SKIP_WORDS = (
    'total', 'subtotal', 'tax', 'invoice', 'date', 'due', 'amount',
    'description', 'item', 'qty', 'quantity', 'price',
)

# Lines at least this long may mention a skip word as part of a product name
SKIP_WORD_MAX_LINE_LENGTH = 30

# Prices outside [MIN, MAX] are noise or totals
MIN_LINE_PRICE = 0.01
MAX_LINE_PRICE = 1000

MIN_ITEM_NAME_LENGTH = 2

# Price above which an unlabeled invoice price is assumed to be per kg
KG_PRICE_THRESHOLD = 10
