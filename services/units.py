"""
Unit Conversion Service

Converts ingredient quantities to and from grams, the base unit for costing.
"""

from constants import GRAMS_PER_UNIT, UNIT_MAPPINGS


def _lookup_key(unit):
    return str(unit or '').strip().lower()


def grams_per_unit(unit):
    """
    Get the gram multiplier for a unit.

    Unknown units are treated as grams (multiplier 1) rather than rejected;
    unit validation happens where entries are saved.
    """
    return GRAMS_PER_UNIT.get(_lookup_key(unit), 1)


def to_grams(value, unit):
    """Convert a quantity in the given unit to grams."""
    return value * grams_per_unit(unit)


def from_grams(grams, unit):
    """Convert a quantity in grams to the given unit."""
    return grams * (1 / grams_per_unit(unit))


def normalize_unit(unit):
    """Return the canonical short form of a unit ('Pounds' -> 'lb'), or None if unrecognized."""
    return UNIT_MAPPINGS.get(_lookup_key(unit))


def is_known_unit(unit):
    return _lookup_key(unit) in UNIT_MAPPINGS
