"""
Storefront Search - product listing search, filtering and ranking

Public entry points:
    score_relevance(product, search_term)
    filter_and_rank(products, criteria)
"""

from .models import FilterCriteria, PriceRange, Product, SearchResults, SortMode
from .services.search import ProductSearchService, filter_and_rank, score_relevance

__version__ = "1.0.0"

__all__ = [
    "FilterCriteria",
    "PriceRange",
    "Product",
    "SearchResults",
    "SortMode",
    "ProductSearchService",
    "filter_and_rank",
    "score_relevance",
]
