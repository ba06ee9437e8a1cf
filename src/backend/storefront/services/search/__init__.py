"""Product search: relevance scoring, filtering, sorting and pagination"""

from .facets import available_badges, available_categories, default_price_range, max_price
from .filters import apply_filters
from .pagination import Page, iter_pages, paginate
from .pipeline import ProductSearchService, filter_and_rank, score_products
from .relevance_scorer import (
    RelevanceScorer,
    is_fuzzy_match,
    levenshtein_distance,
    score_relevance,
    similarity
)
from .sorting import popularity_score, relevance_sort, sort_products

__all__ = [
    "available_badges",
    "available_categories",
    "default_price_range",
    "max_price",
    "apply_filters",
    "Page",
    "iter_pages",
    "paginate",
    "ProductSearchService",
    "filter_and_rank",
    "score_products",
    "RelevanceScorer",
    "is_fuzzy_match",
    "levenshtein_distance",
    "score_relevance",
    "similarity",
    "popularity_score",
    "relevance_sort",
    "sort_products",
]
