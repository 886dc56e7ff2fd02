"""
Tests for ingredient, plate and template costing.
"""

import copy
import math
from types import SimpleNamespace

import pytest

from services.cost import (
    safe_float,
    calculate_ingredient_cost,
    calculate_ingredient_entry_cost,
    calculate_plate_cost,
    calculate_suggested_price,
    calculate_food_cost_percentage,
    calculate_template_cost_per_unit,
    summarize_dish,
)


# ============================================
# INGREDIENT COST
# ============================================

def test_package_cost_same_unit():
    # $5 per 200 g, using 50 g
    assert math.isclose(calculate_ingredient_cost(5.00, 200, 'g', 50, 'g'), 1.25)


def test_package_cost_cross_unit():
    # $10 per kg, using 500 g
    assert math.isclose(calculate_ingredient_cost(10, 1, 'kg', 500, 'g'), 5.00)
    # $4.53592 per lb, using 100 g
    assert math.isclose(calculate_ingredient_cost(4.53592, 1, 'lb', 100, 'g'), 1.0)
    # Bought in ml, used in fl oz (water density)
    assert math.isclose(calculate_ingredient_cost(3, 1000, 'ml', 10, 'fl oz'), 0.887205)


def test_package_cost_zero_size_is_zero():
    assert calculate_ingredient_cost(10, 0, 'kg', 500, 'g') == 0


# ============================================
# PLATE COST
# ============================================

def test_plate_cost_empty():
    assert calculate_plate_cost([]) == 0
    assert calculate_plate_cost(None) == 0


def test_plate_cost_direct_pricing():
    ingredients = [
        {'name': 'Lemon', 'unit_cost': 0.5, 'quantity': 2, 'unit': 'g'},
        {'name': 'Salt', 'unit_cost': 0.01, 'quantity': 10, 'unit': 'g'},
    ]
    assert math.isclose(calculate_plate_cost(ingredients), 1.1)


def test_plate_cost_mixes_package_and_direct():
    ingredients = [
        {'name': 'Salmon', 'quantity': 200, 'unit': 'g',
         'package_cost': 25, 'package_size': 1, 'package_unit': 'kg'},
        {'name': 'Garnish', 'unit_cost': 0.5, 'quantity': 1, 'unit': 'g',
         'package_cost': None, 'package_size': None, 'package_unit': None},
    ]
    assert math.isclose(calculate_plate_cost(ingredients), 5.5)


def test_package_pricing_needs_all_three_fields():
    entry = {'unit_cost': 2, 'quantity': 3, 'package_cost': 10, 'package_size': 1, 'package_unit': None}
    assert calculate_ingredient_entry_cost(entry) == 6


def test_quantity_unit_defaults_to_grams():
    entry = {'quantity': 250, 'package_cost': 4, 'package_size': 1, 'package_unit': 'kg'}
    assert math.isclose(calculate_ingredient_entry_cost(entry), 1.0)


def test_plate_cost_parses_strings_and_treats_garbage_as_zero():
    ingredients = [
        {'unit_cost': '2.5', 'quantity': '4'},
        {'unit_cost': '', 'quantity': 'abc'},
        {'unit_cost': None},
        {},
    ]
    assert calculate_plate_cost(ingredients) == 10


def test_plate_cost_accepts_objects():
    ingredients = [
        SimpleNamespace(unit_cost=1.5, quantity=2, unit='g',
                        package_cost=None, package_size=None, package_unit=None),
        SimpleNamespace(unit_cost=0, quantity=50, unit='g',
                        package_cost=5.0, package_size=200, package_unit='g'),
    ]
    assert math.isclose(calculate_plate_cost(ingredients), 4.25)


def test_plate_cost_does_not_mutate_input():
    ingredients = [
        {'unit_cost': '1.25', 'quantity': '3', 'unit': 'G'},
        {'quantity': 50, 'unit': 'g', 'package_cost': '5', 'package_size': '200', 'package_unit': 'g'},
    ]
    before = copy.deepcopy(ingredients)
    first = calculate_plate_cost(ingredients)
    second = calculate_plate_cost(ingredients)
    assert first == second
    assert ingredients == before


# ============================================
# PRICING
# ============================================

def test_suggested_price():
    assert math.isclose(calculate_suggested_price(3.00, 30), 10.00)
    assert math.isclose(calculate_suggested_price(3.00), 10.00)
    assert math.isclose(calculate_suggested_price(4.00, 25), 16.00)


def test_suggested_price_zero_inputs():
    assert calculate_suggested_price(0, 30) == 0
    assert calculate_suggested_price(3.00, 0) == 0
    assert calculate_suggested_price(None, 30) == 0


def test_food_cost_percentage():
    assert math.isclose(calculate_food_cost_percentage(3.00, 10.00), 30)
    assert calculate_food_cost_percentage(3.00, 0) == 0
    assert calculate_food_cost_percentage(3.00, None) == 0


def test_food_cost_percentage_is_not_clamped():
    assert math.isclose(calculate_food_cost_percentage(12.00, 10.00), 120)


@pytest.mark.parametrize('plate_cost', [0.37, 3.0, 12.85, 250.0])
@pytest.mark.parametrize('target', [1, 18.5, 30, 42, 100])
def test_suggested_price_round_trips_to_target(plate_cost, target):
    price = calculate_suggested_price(plate_cost, target)
    assert math.isclose(calculate_food_cost_percentage(plate_cost, price), target)


def test_summarize_dish():
    dish = {
        'ingredients': [{'unit_cost': 1.5, 'quantity': 2}],
        'target_margin': 30,
        'selling_price': 12,
    }
    summary = summarize_dish(dish)
    assert math.isclose(summary['plate_cost'], 3.0)
    assert math.isclose(summary['suggested_price'], 10.0)
    assert math.isclose(summary['food_cost_percentage'], 25.0)


def test_summarize_dish_defaults_target_margin():
    summary = summarize_dish({'ingredients': [{'unit_cost': 3, 'quantity': 1}]})
    assert math.isclose(summary['suggested_price'], 10.0)
    assert summary['food_cost_percentage'] == 0


# ============================================
# TEMPLATES
# ============================================

def test_template_cost_per_unit():
    template = {
        'ingredients': [
            {'quantity': 500, 'unit': 'g', 'package_cost': 8, 'package_size': 1, 'package_unit': 'kg'},
            {'unit_cost': 6, 'quantity': 1},
        ],
        'total_yield': 4,
    }
    assert math.isclose(calculate_template_cost_per_unit(template), 2.5)
    template['total_yield'] = '5'
    assert math.isclose(calculate_template_cost_per_unit(template), 2.0)


def test_template_zero_yield_is_zero():
    ingredients = [{'unit_cost': 6, 'quantity': 1}]
    assert calculate_template_cost_per_unit({'ingredients': ingredients, 'total_yield': 0}) == 0
    assert calculate_template_cost_per_unit({'ingredients': ingredients, 'total_yield': ''}) == 0
    assert calculate_template_cost_per_unit({'ingredients': ingredients, 'total_yield': 'lots'}) == 0
    assert calculate_template_cost_per_unit({'ingredients': ingredients}) == 0


def test_template_without_ingredients_is_zero():
    assert calculate_template_cost_per_unit({'ingredients': [], 'total_yield': 10}) == 0
    assert calculate_template_cost_per_unit({'total_yield': 10}) == 0


# ============================================
# NUMBER PARSING
# ============================================

def test_safe_float():
    assert safe_float('12.5') == 12.5
    assert safe_float(' 12.5 kg') == 12.5
    assert safe_float('.5') == 0.5
    assert safe_float('abc') == 0
    assert safe_float('') == 0
    assert safe_float(None) == 0
    assert safe_float('nan') == 0
    assert safe_float(float('inf')) == 0
    assert safe_float(True) == 0
    assert safe_float(10 ** 400) == 0
    assert safe_float('9' * 400) == 0
    assert safe_float('x', default=30) == 30
