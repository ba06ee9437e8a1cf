"""
Product Filters

Independent predicates over a product and the active FilterCriteria.
Each predicate only narrows the set, so they can run in any order; the
cheapest ones run first to keep the fuzzy scorer's input small.
"""

from typing import Callable, Iterable, List

from ...models.criteria import ALL_CATEGORIES, FilterCriteria
from ...models.product import Product

Predicate = Callable[[Product, FilterCriteria], bool]


def is_listable(product: Product, criteria: FilterCriteria) -> bool:
    """Products without a title cannot be rendered"""
    return bool(product.title.strip())


def matches_category(product: Product, criteria: FilterCriteria) -> bool:
    if criteria.category == ALL_CATEGORIES:
        return True
    return product.category == criteria.category


def matches_price(product: Product, criteria: FilterCriteria) -> bool:
    # min > max leaves nothing in range, which is a valid empty listing
    return criteria.price_range.contains(product.price)


def matches_rating(product: Product, criteria: FilterCriteria) -> bool:
    if criteria.min_rating <= 0:
        return True
    return product.rating >= criteria.min_rating


def matches_badges(product: Product, criteria: FilterCriteria) -> bool:
    if not criteria.selected_badges:
        return True
    return product.badge is not None and product.badge in criteria.selected_badges


DEFAULT_PREDICATES: List[Predicate] = [
    is_listable,
    matches_category,
    matches_price,
    matches_rating,
    matches_badges,
]


def apply_filters(
    products: Iterable[Product],
    criteria: FilterCriteria,
    predicates: Iterable[Predicate] = DEFAULT_PREDICATES,
) -> List[Product]:
    """
    Keep products that satisfy every predicate.

    Args:
        products: Candidate products (input order is preserved)
        criteria: Active filter criteria
        predicates: Predicates to apply, in evaluation order

    Returns:
        Surviving products
    """
    predicates = list(predicates)
    return [p for p in products if all(check(p, criteria) for check in predicates)]
