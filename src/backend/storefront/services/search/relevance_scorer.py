"""
Relevance Scorer
----------------
Deterministic, explainable relevance scoring for catalog search.

A product is scored against a free-text term in tiers:
1) Title: exact / prefix / substring match. Only when none of these hit does
   the typo-tolerant fallback run (per-token fuzzy, whole-title fuzzy,
   near-exact similarity).
2) Category: exact / substring / fuzzy.
3) Badge: substring / fuzzy.
4) Bonuses: several matching title tokens, concise titles.

A score of 0 means "no match, exclude". An empty term scores every product
with the same constant so the other filters are unaffected.
"""

from typing import List, Optional

from rapidfuzz.distance import Levenshtein

from ...models.product import Product
from ...models.scoring import ScoringWeights


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum single-character insertions, deletions or substitutions turning a into b"""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Normalized edit-distance similarity in [0, 1].

    1 - distance / max(len(a), len(b)); two empty strings are identical.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def is_fuzzy_match(a: str, b: str, threshold: float) -> bool:
    """
    True when a and b are equal (ignoring case), one contains the other,
    or their similarity reaches threshold. Empty strings never match.
    """
    a = (a or "").lower()
    b = (b or "").lower()
    if not a or not b:
        return False
    if a == b or a in b or b in a:
        return True
    return similarity(a, b) >= threshold


class RelevanceScorer:
    def __init__(self, weights: Optional[ScoringWeights] = None) -> None:
        self.weights = weights or ScoringWeights()

    def score(self, product: Product, search_term: Optional[str]) -> float:
        """
        Score how well product matches search_term.

        Args:
            product: Catalog product
            search_term: Raw user query (trimmed and lower-cased here)

        Returns:
            Non-negative score; 0 excludes the product from results
        """
        term = (search_term or "").strip().lower()
        if not term:
            return self.weights.empty_term_score

        title = (product.title or "").lower()
        tokens = title.split()

        score = self._score_title(title, tokens, term)
        score += self._score_category((product.category or "").lower(), term)
        score += self._score_badge((product.badge or "").lower(), term)

        if self._count_matching_tokens(tokens, term) > 1:
            score += self.weights.multi_token_bonus
        if score > 0 and len(tokens) <= self.weights.concise_title_max_tokens:
            score += self.weights.concise_title_bonus

        return score

    def _score_title(self, title: str, tokens: List[str], term: str) -> float:
        w = self.weights
        if not title:
            return 0

        if title == term:
            return w.title_exact
        if title.startswith(term):
            return w.title_prefix
        if term in title:
            return w.title_substring

        # Typo-tolerant fallback
        for token in tokens:
            if len(token) >= w.min_fuzzy_token_length and is_fuzzy_match(token, term, w.token_fuzzy_threshold):
                return w.title_token_fuzzy

        if len(term) >= w.min_full_title_term_length and is_fuzzy_match(title, term, w.full_title_fuzzy_threshold):
            return w.title_full_fuzzy

        # Catches 1-2 character typos across the whole title
        if w.near_exact_threshold <= similarity(title, term) < 1.0:
            return w.title_near_exact

        return 0

    def _score_category(self, category: str, term: str) -> float:
        w = self.weights
        if not category:
            return 0
        if category == term:
            return w.category_exact
        if term in category:
            return w.category_substring
        if is_fuzzy_match(category, term, w.category_fuzzy_threshold):
            return w.category_fuzzy
        return 0

    def _score_badge(self, badge: str, term: str) -> float:
        w = self.weights
        if not badge:
            return 0
        if term in badge:
            return w.badge_substring
        if is_fuzzy_match(badge, term, w.badge_fuzzy_threshold):
            return w.badge_fuzzy
        return 0

    def _count_matching_tokens(self, tokens: List[str], term: str) -> int:
        w = self.weights
        return sum(
            1
            for token in tokens
            if term in token
            or (len(token) >= w.min_fuzzy_token_length and is_fuzzy_match(token, term, w.token_fuzzy_threshold))
        )


_default_scorer = RelevanceScorer()


def score_relevance(product: Product, search_term: Optional[str], weights: Optional[ScoringWeights] = None) -> float:
    """Score a single product; uses the default weights unless given others"""
    scorer = RelevanceScorer(weights) if weights is not None else _default_scorer
    return scorer.score(product, search_term)
