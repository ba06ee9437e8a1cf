"""
Relevance Scoring Parameters

Point values and fuzzy thresholds were tuned empirically against the live
catalog; they are loaded from search_config.json so they can be adjusted
without code changes.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ScoringWeights(BaseModel):
    """Points awarded per match tier and the thresholds gating fuzzy tiers"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Title tiers
    title_exact: float = 100
    title_prefix: float = 50
    title_substring: float = 30
    title_token_fuzzy: float = 25
    title_full_fuzzy: float = 20
    title_near_exact: float = 15

    # Category and badge tiers
    category_exact: float = 20
    category_substring: float = 10
    category_fuzzy: float = 8
    badge_substring: float = 5
    badge_fuzzy: float = 3

    # Bonuses
    multi_token_bonus: float = 10
    concise_title_bonus: float = 5

    # Thresholds
    token_fuzzy_threshold: float = 0.75
    full_title_fuzzy_threshold: float = 0.70
    near_exact_threshold: float = 0.85
    category_fuzzy_threshold: float = 0.80
    badge_fuzzy_threshold: float = 0.80
    min_fuzzy_token_length: int = 3
    min_full_title_term_length: int = 4
    concise_title_max_tokens: int = 5

    # Score returned for every product when there is no search term
    empty_term_score: float = 1

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "ScoringWeights":
        """
        Build weights from the search config layout.

        Accepts either a flat mapping or the {"scoring": {...},
        "thresholds": {...}} sections of search_config.json.
        """
        if not config:
            return cls()
        values: Dict[str, Any] = {}
        for section in ("scoring", "thresholds"):
            values.update(config.get(section) or {})
        if not values:
            values = dict(config)
        return cls(**values)
