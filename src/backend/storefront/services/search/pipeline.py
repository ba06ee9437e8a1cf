"""
Filter-and-Rank Pipeline

Turns the loaded catalog plus the user's FilterCriteria into the ordered,
paginated list the listing page renders:

    catalog -> category / price / rating / badge filters
            -> relevance scoring (search term present)
            -> relevance order  OR  explicit sort mode
            -> page slice

The pipeline is pure: identical (products, criteria) always yields identical
results, so it can be re-run on every input change.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Optional, Union

import structlog
from pydantic import ValidationError

from ...models.criteria import FilterCriteria
from ...models.product import Product
from ...models.scoring import ScoringWeights
from ...models.search_results import ScoredProduct, SearchResults
from ...utils.logging_context import log_context, log_performance
from ..config.configuration_service import ConfigurationService, get_config_service
from .facets import available_badges, available_categories, default_price_range
from .filters import apply_filters
from .pagination import paginate
from .relevance_scorer import RelevanceScorer
from .sorting import relevance_sort, sort_products

logger = structlog.get_logger(__name__)

CriteriaLike = Union[FilterCriteria, Mapping, None]


def _coerce_products(products: Any) -> List[Product]:
    """Accept Product instances or raw catalog dicts; skip entries that fail validation"""
    if isinstance(products, (str, bytes)) or not isinstance(products, Sequence):
        raise TypeError(f"products must be a sequence of Product, got {type(products).__name__}")

    coerced = []
    for entry in products:
        if isinstance(entry, Product):
            coerced.append(entry)
        elif isinstance(entry, Mapping):
            try:
                coerced.append(Product.model_validate(entry))
            except ValidationError as e:
                logger.warning("product_skipped", product_id=entry.get("id"), errors=e.error_count())
        else:
            raise TypeError(f"products must contain Product or mapping entries, got {type(entry).__name__}")
    return coerced


def _coerce_criteria(criteria: CriteriaLike) -> FilterCriteria:
    if criteria is None:
        return FilterCriteria()
    if isinstance(criteria, FilterCriteria):
        return criteria
    if isinstance(criteria, Mapping):
        return FilterCriteria(**criteria)
    raise TypeError(f"criteria must be FilterCriteria or a mapping, got {type(criteria).__name__}")


def score_products(
    products: Sequence[Product],
    search_term: str,
    scorer: Optional[RelevanceScorer] = None,
) -> List[ScoredProduct]:
    """Score each product against search_term, dropping non-matches (score 0)"""
    scorer = scorer or RelevanceScorer()
    scored = (ScoredProduct(product=p, relevance_score=scorer.score(p, search_term)) for p in products)
    return [s for s in scored if s.relevance_score > 0]


def filter_and_rank(
    products: Sequence[Product],
    criteria: CriteriaLike = None,
    weights: Optional[ScoringWeights] = None,
    paginate_results: bool = True,
) -> SearchResults:
    """
    Filter, score, order and paginate the catalog.

    Args:
        products: Loaded catalog (Product instances or raw dicts)
        criteria: Active FilterCriteria (or mapping of its fields)
        weights: Relevance scoring weights; defaults when omitted
        paginate_results: When False, all ordered items are returned

    Returns:
        SearchResults with the ordered items, total count and page metadata

    Raises:
        TypeError: If products is not a sequence or criteria has the wrong type
        ValueError: If criteria.page_size is not positive
    """
    catalog = _coerce_products(products)
    criteria = _coerce_criteria(criteria)

    filtered = apply_filters(catalog, criteria)

    if criteria.has_search_term:
        ranked = relevance_sort(score_products(filtered, criteria.search_term, RelevanceScorer(weights)))
        ordered = [s.product for s in ranked]
        scores = {str(s.product.id): s.relevance_score for s in ranked}
    else:
        ordered = sort_products(filtered, criteria.sort_mode)
        empty_score = (weights or ScoringWeights()).empty_term_score
        scores = {str(p.id): empty_score for p in ordered}

    if paginate_results:
        page = paginate(ordered, criteria.page, criteria.page_size)
        return SearchResults(
            items=page.items,
            total=page.total,
            filters_applied=criteria.describe(),
            scores={str(p.id): scores[str(p.id)] for p in page.items},
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
            has_more=page.has_more,
        )

    return SearchResults(
        items=ordered,
        total=len(ordered),
        filters_applied=criteria.describe(),
        scores=scores,
        page=1,
        page_size=len(ordered),
        total_pages=1 if ordered else 0,
        has_more=False,
    )


class ProductSearchService:
    """
    Config-driven entry point for the listing page.

    Loads scoring weights and the page size from search_config.json and logs
    each search with its filters and result counts.
    """

    def __init__(self, config_service: Optional[ConfigurationService] = None) -> None:
        self.config_service = config_service or get_config_service()
        self.weights = self.config_service.get_scoring_weights()
        self.page_size = self.config_service.get_page_size()

    def default_criteria(self, products: Sequence[Product] = ()) -> FilterCriteria:
        """Criteria showing the whole catalog on page 1"""
        return FilterCriteria(
            price_range=default_price_range(
                products,
                default=self.config_service.get_default_max_price(),
                step=self.config_service.get_price_step(),
            ),
            page_size=self.page_size,
        )

    def facets(self, products: Sequence[Product]) -> Dict[str, Any]:
        """Categories, badges and price ceiling for the filter panel"""
        price_range = self.default_criteria(products).price_range
        return {
            "categories": available_categories(products),
            "badges": available_badges(products),
            "max_price": price_range.max,
        }

    def search(self, products: Sequence[Product], criteria: CriteriaLike = None) -> SearchResults:
        if criteria is None:
            criteria = self.default_criteria(_coerce_products(products))
        elif isinstance(criteria, Mapping) and "page_size" not in criteria:
            criteria = {**criteria, "page_size": self.page_size}
        criteria = _coerce_criteria(criteria)

        with log_context(operation="product_search"):
            with log_performance("filter_and_rank", logger):
                results = filter_and_rank(products, criteria, weights=self.weights)

            logger.info(
                "product_search_completed",
                filters=results.filters_applied,
                total=results.total,
                page=results.page,
                total_pages=results.total_pages,
            )
        return results
