"""
Listing Facets

Values the filter panel offers, derived from the loaded catalog.
"""

import math
from typing import Iterable, List

from ...models.criteria import ALL_CATEGORIES, PriceRange
from ...models.product import Product

DEFAULT_MAX_PRICE = 500.0
PRICE_STEP = 50.0


def available_categories(products: Iterable[Product]) -> List[str]:
    """The "All" sentinel followed by each category in first-seen order"""
    seen = dict.fromkeys(p.category for p in products if p.category)
    return [ALL_CATEGORIES] + list(seen)


def available_badges(products: Iterable[Product]) -> List[str]:
    """Distinct badges in first-seen order"""
    return list(dict.fromkeys(p.badge for p in products if p.badge))


def max_price(
    products: Iterable[Product],
    default: float = DEFAULT_MAX_PRICE,
    step: float = PRICE_STEP,
) -> float:
    """
    Price slider ceiling: the highest price rounded up to the next step.

    Falls back to default when the catalog has no priced products.
    """
    prices = [p.price for p in products if p.price > 0]
    if not prices:
        return default
    return math.ceil(max(prices) / step) * step


def default_price_range(
    products: Iterable[Product],
    default: float = DEFAULT_MAX_PRICE,
    step: float = PRICE_STEP,
) -> PriceRange:
    """Price range covering the whole catalog"""
    return PriceRange(min=0, max=max_price(products, default, step))
