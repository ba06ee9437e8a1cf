"""
Product Data Model

Catalog entries as supplied by the static products feed. The feed is
occasionally incomplete, so numeric fields degrade to neutral defaults
instead of failing validation.
"""

import math
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def coerce_number(value: Any) -> float:
    """Return value as a finite float, or 0.0 when it is missing or malformed."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


class Product(BaseModel):
    """Single catalog product (read-only during search)"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: Union[int, str]
    title: str = ""
    category: str = ""
    price: float = 0.0
    list_price: Optional[float] = Field(default=None, alias="listPrice")
    rating: float = 0.0
    reviews: int = 0
    badge: Optional[str] = None
    description: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")
    review_url: Optional[str] = Field(default=None, alias="reviewUrl")

    @field_validator("title", "category", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        if value is None:
            return ""
        return str(value)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value):
        return max(coerce_number(value), 0.0)

    @field_validator("list_price", mode="before")
    @classmethod
    def _coerce_list_price(cls, value):
        """A missing or zero list price means the product is not discounted."""
        number = coerce_number(value)
        return number if number > 0 else None

    @field_validator("rating", mode="before")
    @classmethod
    def _clamp_rating(cls, value):
        return min(max(coerce_number(value), 0.0), 5.0)

    @field_validator("reviews", mode="before")
    @classmethod
    def _coerce_reviews(cls, value):
        return max(int(coerce_number(value)), 0)

    @field_validator("badge", mode="before")
    @classmethod
    def _normalize_badge(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("features", mode="before")
    @classmethod
    def _normalize_features(cls, value):
        if not value:
            return []
        if not isinstance(value, (list, tuple, set, frozenset)):
            return [str(value)]
        return [str(feature) for feature in value if feature]

    @property
    def savings(self) -> float:
        """Absolute saving against the list price (0 when not discounted)"""
        if self.list_price is None or self.list_price <= self.price:
            return 0.0
        return self.list_price - self.price

    @property
    def discount_percent(self) -> float:
        """Percentage saving against the list price (0 when not discounted)"""
        if not self.savings:
            return 0.0
        return self.savings / self.list_price * 100
