"""
Unit Constants and Conversion Tables

Contains the weight/volume unit mappings and gram conversion factors
used by ingredient cost calculations.
"""

# Grams per ONE unit (lowercase input -> multiplier)
# Volumes use the density of water: 1 ml = 1 g, 1 fl oz = 29.5735 g
GRAMS_PER_UNIT = {
    'g': 1, 'gram': 1, 'grams': 1,
    'kg': 1000, 'kilogram': 1000, 'kilograms': 1000,
    'oz': 28.3495, 'ounce': 28.3495, 'ounces': 28.3495,
    'lb': 453.592, 'lbs': 453.592, 'pound': 453.592, 'pounds': 453.592,
    'ml': 1, 'milliliter': 1, 'milliliters': 1,
    'fl oz': 29.5735, 'floz': 29.5735, 'fluid ounce': 29.5735, 'fluid ounces': 29.5735,
}

# Unit aliases (lowercase input -> canonical unit)
UNIT_MAPPINGS = {
    'g': 'g', 'gram': 'g', 'grams': 'g',
    'kg': 'kg', 'kilogram': 'kg', 'kilograms': 'kg',
    'oz': 'oz', 'ounce': 'oz', 'ounces': 'oz',
    'lb': 'lb', 'lbs': 'lb', 'pound': 'lb', 'pounds': 'lb',
    'ml': 'ml', 'milliliter': 'ml', 'milliliters': 'ml',
    'fl oz': 'fl oz', 'floz': 'fl oz', 'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz',
}

# Canonical units offered in ingredient and template forms
WEIGHT_UNITS = ('g', 'kg', 'oz', 'lb', 'ml', 'fl oz')

DEFAULT_UNIT = 'g'
