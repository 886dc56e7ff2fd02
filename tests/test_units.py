"""
Tests for gram-based unit conversion.
"""

import math

from constants import WEIGHT_UNITS
from services.units import to_grams, from_grams, normalize_unit, is_known_unit, grams_per_unit


def test_to_grams_canonical_units():
    assert to_grams(1, 'g') == 1
    assert to_grams(1, 'kg') == 1000
    assert to_grams(1, 'oz') == 28.3495
    assert to_grams(1, 'lb') == 453.592
    assert to_grams(1, 'ml') == 1
    assert to_grams(1, 'fl oz') == 29.5735


def test_to_grams_aliases_case_and_whitespace():
    assert to_grams(2, ' KG ') == 2000
    assert to_grams(1, 'Pounds') == 453.592
    assert to_grams(1, 'lbs') == 453.592
    assert to_grams(1, 'Fluid Ounces') == 29.5735
    assert to_grams(3, 'milliliters') == 3


def test_unknown_unit_falls_back_to_grams():
    assert to_grams(5, 'bogus-unit') == 5
    assert to_grams(4, '') == 4
    assert to_grams(4, None) == 4
    assert from_grams(7, 'cup') == 7


def test_from_grams_inverts_to_grams():
    assert math.isclose(from_grams(1000, 'kg'), 1)
    assert math.isclose(from_grams(453.592, 'lb'), 1)
    for unit in WEIGHT_UNITS:
        assert math.isclose(from_grams(to_grams(12.5, unit), unit), 12.5)


def test_normalize_unit():
    assert normalize_unit('Kilograms') == 'kg'
    assert normalize_unit('floz') == 'fl oz'
    assert normalize_unit(' OZ') == 'oz'
    assert normalize_unit('cup') is None
    assert normalize_unit(None) is None


def test_is_known_unit():
    assert is_known_unit('gram')
    assert not is_known_unit('pinch')
    assert grams_per_unit('pinch') == 1
