"""
Cost Calculation Service

Functions for calculating ingredient, plate and template costs.

Every function here is total: zero or missing denominators yield 0 and
unparsable numbers count as 0, so a live cost display never breaks on
half-typed input. Results are returned unrounded.
"""

import math
import re

from constants import DEFAULT_UNIT
from .units import to_grams

_LEADING_NUMBER = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

DEFAULT_TARGET_MARGIN = 30


def safe_float(value, default=0.0):
    """
    Parse a number leniently.

    Accepts numbers and numeric strings, including strings with trailing
    text ('12.5 kg' -> 12.5). Anything else, and non-finite values,
    returns `default`.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            return default
    else:
        text = str(value).strip()
        try:
            result = float(text)
        except ValueError:
            match = _LEADING_NUMBER.match(text)
            if not match:
                return default
            result = float(match.group(0))
    if not math.isfinite(result):
        return default
    return result


def _field(entry, name):
    """Read a field from a dict payload or an ORM row."""
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)


def calculate_ingredient_cost(package_cost, package_size, package_unit, quantity_used, quantity_unit):
    """
    Calculate the cost of the quantity used from a package price.

    Both sides are converted to grams so the package can be bought in one
    unit and used in another.

    Example: $5.00 for a 200 g package, using 50 g
        cost per gram = 5.00 / 200 = 0.025
        cost = 0.025 * 50 = 1.25

    Args:
        package_cost: Total cost of the package
        package_size: Size of the package in package_unit
        package_unit: Unit of package_size (g, kg, oz, lb, ml, fl oz)
        quantity_used: Amount used in the dish
        quantity_unit: Unit of quantity_used

    Returns:
        Cost of the quantity used, 0 if the package size is 0
    """
    package_grams = to_grams(package_size, package_unit)
    quantity_grams = to_grams(quantity_used, quantity_unit)

    if package_grams == 0:
        return 0.0

    cost_per_gram = package_cost / package_grams
    return cost_per_gram * quantity_grams


def calculate_ingredient_entry_cost(entry):
    """
    Calculate the cost of one ingredient entry.

    Package pricing is used when package_cost, package_size and package_unit
    are all set; otherwise unit_cost * quantity.
    """
    package_cost = safe_float(_field(entry, 'package_cost'))
    package_size = safe_float(_field(entry, 'package_size'))
    package_unit = _field(entry, 'package_unit')
    quantity = safe_float(_field(entry, 'quantity'))

    if package_cost and package_size and package_unit:
        return calculate_ingredient_cost(
            package_cost,
            package_size,
            package_unit,
            quantity,
            _field(entry, 'unit') or DEFAULT_UNIT,
        )

    return safe_float(_field(entry, 'unit_cost')) * quantity


def calculate_plate_cost(ingredients):
    """Sum the cost of every ingredient entry in a dish. Returns 0 for no ingredients."""
    if not ingredients:
        return 0.0
    return sum((calculate_ingredient_entry_cost(entry) for entry in ingredients), 0.0)


def calculate_suggested_price(plate_cost, target_margin=DEFAULT_TARGET_MARGIN):
    """
    Calculate the selling price that hits a target food cost percentage.

    Example: plate cost $3.00, target 30% -> 3.00 / 0.30 = $10.00
    """
    plate_cost = safe_float(plate_cost)
    target_margin = safe_float(target_margin)
    if not plate_cost or not target_margin:
        return 0.0
    return plate_cost / (target_margin / 100)


def calculate_food_cost_percentage(plate_cost, selling_price):
    """
    Calculate food cost as a percentage of the selling price.

    Not clamped: above 100 means the dish sells below its ingredient cost.
    """
    selling_price = safe_float(selling_price)
    if not selling_price:
        return 0.0
    return (safe_float(plate_cost) / selling_price) * 100


def calculate_template_cost_per_unit(template):
    """Cost per unit of yield for an ingredient template, 0 when it has no yield."""
    ingredients = _field(template, 'ingredients')
    if not ingredients:
        return 0.0

    total_cost = calculate_plate_cost(ingredients)
    total_yield = safe_float(_field(template, 'total_yield'))

    if total_yield == 0:
        return 0.0

    return total_cost / total_yield


def summarize_dish(dish):
    """Derive plate cost, suggested price and food cost % from a dish's current ingredients."""
    plate_cost = calculate_plate_cost(_field(dish, 'ingredients'))
    target_margin = _field(dish, 'target_margin')
    if target_margin is None:
        target_margin = DEFAULT_TARGET_MARGIN
    return {
        'plate_cost': plate_cost,
        'suggested_price': calculate_suggested_price(plate_cost, target_margin),
        'food_cost_percentage': calculate_food_cost_percentage(plate_cost, _field(dish, 'selling_price')),
    }
