"""
Services Package

Business logic modules for the menu costing application.
"""

from .units import (
    grams_per_unit,
    to_grams,
    from_grams,
    normalize_unit,
    is_known_unit,
)

from .cost import (
    safe_float,
    calculate_ingredient_cost,
    calculate_ingredient_entry_cost,
    calculate_plate_cost,
    calculate_suggested_price,
    calculate_food_cost_percentage,
    calculate_template_cost_per_unit,
    summarize_dish,
)

from .estimate import (
    lookup_market_cost,
    estimate_ingredient_cost,
)

from .invoice import (
    clean_item_name,
    parse_invoice_line,
    parse_invoice_text,
    infer_unit,
    line_items_to_ingredients,
)

__all__ = [
    # Units
    'grams_per_unit',
    'to_grams',
    'from_grams',
    'normalize_unit',
    'is_known_unit',
    # Cost
    'safe_float',
    'calculate_ingredient_cost',
    'calculate_ingredient_entry_cost',
    'calculate_plate_cost',
    'calculate_suggested_price',
    'calculate_food_cost_percentage',
    'calculate_template_cost_per_unit',
    'summarize_dish',
    # Estimate
    'lookup_market_cost',
    'estimate_ingredient_cost',
    # Invoice
    'clean_item_name',
    'parse_invoice_line',
    'parse_invoice_text',
    'infer_unit',
    'line_items_to_ingredients',
]
