"""
Product Sorting

Explicit sort modes for the listing page when no search term is active,
plus relevance ordering for search results. All sorts are stable.
"""

import math
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ...models.criteria import SortMode
from ...models.product import Product
from ...models.search_results import ScoredProduct


def popularity_score(product: Product) -> float:
    """
    Quality weighted by social proof: rating * log10(reviews + 10).

    The +10 floor keeps unreviewed products above zero so their rating
    still separates them.
    """
    return product.rating * math.log10(product.reviews + 10)


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _id_key(product: Product) -> Tuple[int, float, str]:
    """Finite numeric ids compare numerically and rank above non-numeric ids"""
    raw = str(product.id)
    try:
        number = float(raw)
    except ValueError:
        return (0, 0.0, raw)
    if not math.isfinite(number):
        return (0, 0.0, raw)
    return (1, number, raw)


def _latest_key(product: Product) -> Tuple[int, float, Tuple[int, float, str]]:
    """Dated products newest first, then undated products by descending id"""
    timestamp = _parse_timestamp(product.last_updated)
    if timestamp is None:
        return (0, 0.0, _id_key(product))
    return (1, timestamp.timestamp(), _id_key(product))


_SORT_KEYS: Dict[SortMode, Tuple[Callable[[Product], object], bool]] = {
    # mode: (key, descending)
    SortMode.LATEST: (_latest_key, True),
    SortMode.PRICE_LOW: (lambda p: p.price, False),
    SortMode.PRICE_HIGH: (lambda p: p.price, True),
    SortMode.RATING: (lambda p: (p.rating, p.reviews), True),
    SortMode.REVIEWS: (lambda p: p.reviews, True),
    SortMode.DISCOUNT: (lambda p: p.discount_percent, True),
    SortMode.SAVINGS: (lambda p: p.savings, True),
    SortMode.DEFAULT: (popularity_score, True),
}


def sort_products(products: Sequence[Product], sort_mode: SortMode = SortMode.DEFAULT) -> List[Product]:
    """Return a new list ordered by sort_mode (unknown modes use DEFAULT)"""
    key, descending = _SORT_KEYS.get(SortMode.parse(sort_mode), _SORT_KEYS[SortMode.DEFAULT])
    return sorted(products, key=key, reverse=descending)


def relevance_sort(scored: Sequence[ScoredProduct]) -> List[ScoredProduct]:
    """Highest relevance first; equal scores favour the better-rated product"""
    return sorted(scored, key=lambda s: (s.relevance_score, s.product.rating), reverse=True)
