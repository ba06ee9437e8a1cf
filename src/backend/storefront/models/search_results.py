"""
Search Result Models

Shared result shapes returned by the filter-and-rank pipeline.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .product import Product


class ScoredProduct(BaseModel):
    """Product paired with its relevance score (0 = excluded)"""

    model_config = ConfigDict(frozen=True)

    product: Product
    relevance_score: float = 0.0


class SearchResults(BaseModel):
    """Ordered products for display with pagination metadata"""

    items: List[Product]
    total: int
    filters_applied: Dict[str, Any] = Field(default_factory=dict)
    scores: Dict[str, float] = Field(default_factory=dict)
    # Pagination fields
    page: int = 1
    page_size: int = 0
    total_pages: int = 0
    has_more: bool = False  # More results exist beyond the current page
