"""
Market Cost Constants

Typical restaurant/wholesale prices in USD per gram, used to pre-fill
ingredient forms. Example: 0.025 per gram = $25/kg = ~$11.34/lb.
"""

# Ordered (keyword, base, variance) rules. Evaluated top to bottom and the
# first keyword contained in the ingredient name wins, so order matters:
# 'chicken' shadows 'chicken breast', 'oil' shadows 'vegetable oil'.
MARKET_COST_RULES = [
    # Grains & Starches
    ('flour', 0.001, 0.0005),
    ('sugar', 0.0015, 0.0005),
    ('salt', 0.0002, 0.0001),
    ('rice', 0.002, 0.001),
    ('pasta', 0.002, 0.001),
    ('bread', 0.003, 0.001),
    # Poultry
    ('chicken', 0.008, 0.003),
    ('chicken breast', 0.010, 0.004),
    ('chicken thigh', 0.007, 0.003),
    ('turkey', 0.009, 0.003),
    # Red meat
    ('beef', 0.015, 0.006),
    ('ground beef', 0.012, 0.005),
    ('steak', 0.025, 0.010),
    ('pork', 0.010, 0.004),
    ('bacon', 0.020, 0.008),
    ('lamb', 0.018, 0.007),
    # Seafood
    ('salmon', 0.025, 0.010),
    ('tuna', 0.020, 0.008),
    ('fish', 0.015, 0.006),
    ('shrimp', 0.030, 0.012),
    ('crab', 0.035, 0.015),
    ('lobster', 0.050, 0.020),
    # Dairy
    ('cheese', 0.012, 0.005),
    ('butter', 0.008, 0.003),
    ('cream', 0.006, 0.002),
    ('milk', 0.002, 0.001),
    ('yogurt', 0.004, 0.002),
    # Oils & Fats
    ('olive oil', 0.015, 0.006),
    ('oil', 0.010, 0.004),
    ('vegetable oil', 0.008, 0.003),
    ('coconut oil', 0.018, 0.007),
    # Vegetables
    ('onion', 0.002, 0.001),
    ('garlic', 0.008, 0.003),
    ('tomato', 0.003, 0.001),
    ('lettuce', 0.004, 0.002),
    ('spinach', 0.005, 0.002),
    ('potato', 0.002, 0.001),
    ('carrot', 0.002, 0.001),
    ('bell pepper', 0.004, 0.002),
    ('mushroom', 0.008, 0.003),
    # Herbs & Spices (dried)
    ('herb', 0.15, 0.05),
    ('spice', 0.20, 0.08),
    ('basil', 0.12, 0.04),
    ('parsley', 0.010, 0.004),
    ('oregano', 0.15, 0.05),
    ('thyme', 0.18, 0.06),
    ('rosemary', 0.15, 0.05),
    ('pepper', 0.25, 0.10),
    ('paprika', 0.12, 0.04),
    # Other
    ('egg', 0.003, 0.001),
    ('eggs', 0.003, 0.001),
    ('vinegar', 0.002, 0.001),
    ('lemon', 0.004, 0.002),
    ('lime', 0.004, 0.002),
    ('wine', 0.01, 0.004),
    ('stock', 0.003, 0.001),
    ('broth', 0.003, 0.001),
]

# Second-pass keywords, checked in this order when no rule matched
COMMON_KEYWORDS = [
    'flour', 'sugar', 'salt', 'chicken', 'beef', 'pork', 'fish', 'salmon',
    'cheese', 'butter', 'oil', 'herb', 'spice', 'tomato', 'onion', 'garlic',
]

# Words that mark a higher-priced product
PREMIUM_KEYWORDS = ('organic', 'premium', 'artisan')
PREMIUM_BASE_MULTIPLIER = 1.5
PREMIUM_VARIANCE_MULTIPLIER = 1.2

# Fallback for unknown ingredients (~$10/kg)
DEFAULT_BASE_COST = 0.010
DEFAULT_VARIANCE = 0.004

MIN_BASE_COST = 0.001
MIN_VARIANCE_RATIO = 0.2
MIN_COST_FLOOR = 0.0001
MIN_VISIBLE_SPREAD = 0.001

MATCHED_CONFIDENCE = 0.80
UNMATCHED_CONFIDENCE = 0.60
ESTIMATE_SOURCE = 'Market Estimate'
