"""
Filter Criteria Models

Explicit, caller-owned description of what the listing page should show.
Every search call receives one of these; nothing is kept between calls.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .product import coerce_number

ALL_CATEGORIES = "All"
DEFAULT_PAGE_SIZE = 12

# Fields that do not reset pagination when changed
_NON_FILTER_FIELDS = {"page", "page_size"}


class SortMode(str, Enum):
    """Ordering strategies available when no search term is active"""

    DEFAULT = "default"
    LATEST = "latest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"
    REVIEWS = "reviews"
    DISCOUNT = "discount"
    SAVINGS = "savings"

    @classmethod
    def parse(cls, value: Any) -> "SortMode":
        """Resolve a raw value to a SortMode, falling back to DEFAULT."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DEFAULT


class PriceRange(BaseModel):
    """Inclusive [min, max] price bounds"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min: float = 0.0
    max: float = float("inf")

    @field_validator("min", mode="before")
    @classmethod
    def _coerce_min(cls, value):
        return coerce_number(value)

    @field_validator("max", mode="before")
    @classmethod
    def _coerce_max(cls, value):
        """Missing or infinite upper bound means no ceiling"""
        if value is None or value == float("inf"):
            return float("inf")
        return coerce_number(value)

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max


class FilterCriteria(BaseModel):
    """UI-driven search, filter, sort and page selection"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search_term: str = ""
    category: str = ALL_CATEGORIES
    price_range: PriceRange = Field(default_factory=PriceRange)
    min_rating: float = 0.0
    selected_badges: FrozenSet[str] = Field(default_factory=frozenset)
    sort_mode: SortMode = SortMode.DEFAULT
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("search_term", mode="before")
    @classmethod
    def _coerce_search_term(cls, value):
        return "" if value is None else str(value)

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value):
        return value or ALL_CATEGORIES

    @field_validator("price_range", mode="before")
    @classmethod
    def _coerce_price_range(cls, value):
        """Accept a PriceRange, a mapping or a [min, max] pair"""
        if value is None:
            return PriceRange()
        if isinstance(value, (list, tuple)):
            low, high = (list(value) + [None, None])[:2]
            return PriceRange(min=low, max=high)
        return value

    @field_validator("min_rating", mode="before")
    @classmethod
    def _coerce_min_rating(cls, value):
        return coerce_number(value)

    @field_validator("selected_badges", mode="before")
    @classmethod
    def _coerce_badges(cls, value):
        if not value:
            return frozenset()
        if isinstance(value, str):
            return frozenset([value])
        return frozenset(badge for badge in value if badge)

    @field_validator("sort_mode", mode="before")
    @classmethod
    def _coerce_sort_mode(cls, value):
        return SortMode.parse(value)

    @field_validator("page", mode="before")
    @classmethod
    def _coerce_page(cls, value):
        return max(int(coerce_number(value)), 1)

    @property
    def has_search_term(self) -> bool:
        return bool(self.search_term.strip())

    def with_changes(self, **changes: Any) -> "FilterCriteria":
        """
        Return a copy with the given fields replaced.

        Changing any filter, search or sort field sends the user back to
        page 1 unless an explicit page is supplied.
        """
        data = self.model_dump()
        data.update(changes)
        if "page" not in changes and set(changes) - _NON_FILTER_FIELDS:
            data["page"] = 1
        return FilterCriteria(**data)

    def describe(self) -> Dict[str, Any]:
        """Summary of the active filters (for logs and result metadata)"""
        summary: Dict[str, Any] = {
            "category": self.category,
            "price_range": [self.price_range.min, self.price_range.max],
            "sort_mode": self.sort_mode.value,
        }
        if self.has_search_term:
            summary["search_term"] = self.search_term.strip()
        if self.min_rating > 0:
            summary["min_rating"] = self.min_rating
        if self.selected_badges:
            summary["selected_badges"] = sorted(self.selected_badges)
        return summary

