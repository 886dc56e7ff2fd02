"""
Constants Package

Static tables shared by the costing, estimation and invoice services.
"""

from .units import GRAMS_PER_UNIT, UNIT_MAPPINGS, WEIGHT_UNITS, DEFAULT_UNIT
from .market import (
    MARKET_COST_RULES,
    COMMON_KEYWORDS,
    PREMIUM_KEYWORDS,
    PREMIUM_BASE_MULTIPLIER,
    PREMIUM_VARIANCE_MULTIPLIER,
    DEFAULT_BASE_COST,
    DEFAULT_VARIANCE,
    MIN_BASE_COST,
    MIN_VARIANCE_RATIO,
    MIN_COST_FLOOR,
    MIN_VISIBLE_SPREAD,
    MATCHED_CONFIDENCE,
    UNMATCHED_CONFIDENCE,
    ESTIMATE_SOURCE,
)
from .invoice import (
    INVOICE_SKIP_WORDS,
    SKIP_WORD_MAX_LINE_LENGTH,
    MIN_LINE_PRICE,
    MAX_LINE_PRICE,
    MIN_ITEM_NAME_LENGTH,
    KG_PRICE_THRESHOLD,
)
from .validation import (
    VALID_UNITS,
    MAX_LENGTHS,
    DEFAULT_CATEGORY_COLOR,
    ALLOWED_INVOICE_EXTENSIONS,
    MAX_DB_INTEGER,
)
