"""Models package - catalog products, filter criteria and search results"""

from .product import Product

from .criteria import (
    ALL_CATEGORIES,
    DEFAULT_PAGE_SIZE,
    FilterCriteria,
    PriceRange,
    SortMode
)

from .scoring import ScoringWeights

from .search_results import (
    ScoredProduct,
    SearchResults
)

__all__ = [
    "Product",
    "ALL_CATEGORIES",
    "DEFAULT_PAGE_SIZE",
    "FilterCriteria",
    "PriceRange",
    "SortMode",
    "ScoringWeights",
    "ScoredProduct",
    "SearchResults"
]
