"""
Market Cost Estimation Service

Heuristic cost-per-gram ranges for ingredient names. Estimates are a
starting point for the user to adjust, not authoritative prices.
"""

import asyncio

from constants import (
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

DEFAULT_ESTIMATE_DELAY = 1.0

_RULES_BY_KEYWORD = {keyword: (base, variance) for keyword, base, variance in MARKET_COST_RULES}


def _match_rule(name):
    """First rule whose keyword is the name or appears in it, in table order."""
    for keyword, base, variance in MARKET_COST_RULES:
        if name == keyword or keyword in name:
            return base, variance
    return None


def _match_common_keyword(name):
    for word in COMMON_KEYWORDS:
        if word in name and word in _RULES_BY_KEYWORD:
            return _RULES_BY_KEYWORD[word]
    return None


def lookup_market_cost(ingredient_name):
    """
    Estimate the cost per gram of an ingredient from its name.

    Returns:
        dict with perUnitCost, minCost, maxCost, unit, confidence, source
    """
    name = (ingredient_name or '').lower().strip()

    base_cost, variance = DEFAULT_BASE_COST, DEFAULT_VARIANCE
    match = _match_rule(name)
    if match:
        base_cost, variance = match
    else:
        common = _match_common_keyword(name)
        if common:
            base_cost, variance = common

    if any(word in name for word in PREMIUM_KEYWORDS):
        base_cost *= PREMIUM_BASE_MULTIPLIER
        variance *= PREMIUM_VARIANCE_MULTIPLIER

    base_cost = max(base_cost, MIN_BASE_COST)
    variance = max(variance, base_cost * MIN_VARIANCE_RATIO)

    min_cost = max(MIN_COST_FLOOR, base_cost - variance)
    max_cost = base_cost + variance

    # Keep the range visible at display precision
    if max_cost - min_cost < MIN_VISIBLE_SPREAD:
        center = (min_cost + max_cost) / 2
        half_spread = MIN_VISIBLE_SPREAD / 2
        min_cost = max(MIN_COST_FLOOR, center - half_spread)
        max_cost = center + half_spread

    return {
        'perUnitCost': base_cost,
        'minCost': min_cost,
        'maxCost': max_cost,
        'unit': 'g',
        # Only a first-pass rule match counts as matched
        'confidence': MATCHED_CONFIDENCE if match else UNMATCHED_CONFIDENCE,
        'source': ESTIMATE_SOURCE,
    }


async def estimate_ingredient_cost(ingredient_name, delay=None):
    """
    Estimate an ingredient's cost as if consulting a pricing service.

    The delay stands in for lookup latency; callers embedding this in a
    request should apply their own timeout.
    """
    if delay is None:
        delay = DEFAULT_ESTIMATE_DELAY
    if delay > 0:
        await asyncio.sleep(delay)
    return lookup_market_cost(ingredient_name)
