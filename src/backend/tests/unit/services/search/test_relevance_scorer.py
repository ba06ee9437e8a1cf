"""
Unit tests for relevance scoring

Covers the edit-distance helpers, each scoring tier and the tunable
weights/thresholds.
"""

import pytest

from storefront.models import Product, ScoringWeights
from storefront.services.search.relevance_scorer import (
    RelevanceScorer,
    is_fuzzy_match,
    levenshtein_distance,
    score_relevance,
    similarity,
)


def make_product(title, category="", badge=None, **kwargs):
    return Product(id=kwargs.pop("id", 1), title=title, category=category, badge=badge, **kwargs)


@pytest.mark.unit
class TestEditDistance:
    """Levenshtein distance and normalized similarity"""

    @pytest.mark.parametrize("a, b, expected", [
        ("kitten", "sitting", 3),
        ("headphones", "hedphones", 1),
        ("", "abc", 3),
        ("same", "same", 0),
        ("flaw", "lawn", 2),
    ])
    def test_levenshtein_distance(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected

    def test_similarity_normalizes_by_longest_string(self):
        assert similarity("headphones", "hedphones") == pytest.approx(0.9)
        assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_similarity_of_empty_strings_is_one(self):
        assert similarity("", "") == 1.0

    def test_similarity_of_unrelated_strings_is_zero(self):
        assert similarity("abc", "xyz") == 0.0


@pytest.mark.unit
class TestFuzzyMatch:
    """is_fuzzy_match rule: equality, containment or similarity threshold"""

    def test_typo_matches(self):
        assert is_fuzzy_match("headphones", "hedphones", 0.75) is True

    def test_unrelated_does_not_match(self):
        assert is_fuzzy_match("headphones", "xyz", 0.75) is False

    def test_case_insensitive_equality(self):
        assert is_fuzzy_match("Blue", "BLUE", 0.99) is True

    def test_containment_either_direction(self):
        assert is_fuzzy_match("speaker", "bluetooth speaker", 0.99) is True
        assert is_fuzzy_match("bluetooth speaker", "speaker", 0.99) is True

    def test_empty_operand_never_matches(self):
        assert is_fuzzy_match("", "abc", 0.0) is False
        assert is_fuzzy_match("abc", "", 0.0) is False

    def test_threshold_is_inclusive(self):
        # similarity("headphones", "hedphones") == 0.9
        assert is_fuzzy_match("headphones", "hedphones", 0.9) is True
        assert is_fuzzy_match("headphones", "hedphones", 0.91) is False


@pytest.mark.unit
class TestEmptyTerm:
    """Empty search term passes every product through"""

    @pytest.mark.parametrize("term", ["", "   ", None])
    def test_empty_term_scores_one(self, headphones, term):
        assert score_relevance(headphones, term) == 1

    def test_empty_term_identical_for_all_products(self, sample_catalog):
        assert {score_relevance(p, "") for p in sample_catalog} == {1}


@pytest.mark.unit
class TestTitleTiers:
    """Exact, prefix, substring and typo-tolerant title matching"""

    def test_exact_title_match(self, headphones):
        # exact 100 + both tokens match 10 + concise title 5
        assert score_relevance(headphones, "Wireless Headphones") == 115

    def test_exact_match_ignores_case_and_padding(self, headphones):
        assert score_relevance(headphones, "  wireless HEADPHONES ") == 115

    def test_prefix_match(self, headphones):
        assert score_relevance(headphones, "wireless") == 55

    def test_substring_match(self, headphones):
        assert score_relevance(headphones, "headphones") == 35

    def test_token_typo_match(self, headphones):
        # token fuzzy 25 + concise title 5
        assert score_relevance(headphones, "hedphones") == 30

    def test_whole_title_fuzzy_match(self):
        # Tokens shorter than 3 characters are never fuzzy-matched individually
        product = make_product("ab cd ef")
        # similarity("ab cd ef", "abcdef") == 0.75 -> whole-title tier 20 + concise 5
        assert score_relevance(product, "abcdef") == 25

    def test_whole_title_fuzzy_requires_four_character_term(self):
        product = make_product("ab cd")
        # "abd" is too short for the whole-title attempt
        assert score_relevance(product, "abd") == 0

    def test_near_exact_tier_with_custom_gates(self):
        weights = ScoringWeights(min_fuzzy_token_length=100, min_full_title_term_length=100)
        product = make_product("Blender")
        # similarity("blender", "blendr") == 1 - 1/7 ~= 0.857
        assert score_relevance(product, "blendr", weights) == 15 + 5

    def test_short_term_still_uses_substring_tiers(self):
        product = make_product("ab cd ef")
        assert score_relevance(product, "ab") == 55

    def test_no_match_scores_zero(self, headphones):
        assert score_relevance(headphones, "zzzz") == 0

    def test_fuzzy_tier_skipped_when_substring_hits(self):
        # "lamp" is a substring; the typo tiers must not add on top of it
        product = make_product("Desk Lamp")
        assert score_relevance(product, "lamp") == 30 + 5


@pytest.mark.unit
class TestCategoryAndBadgeTiers:
    """Category and badge contributions are additive with title tiers"""

    def test_category_exact(self, headphones):
        assert score_relevance(headphones, "electronics") == 20 + 5

    def test_category_substring(self, headphones):
        assert score_relevance(headphones, "electron") == 10 + 5

    def test_category_fuzzy(self, headphones):
        assert score_relevance(headphones, "electronix") == 8 + 5

    def test_badge_substring(self):
        product = make_product("Desk Lamp", category="Home", badge="Best Seller")
        assert score_relevance(product, "seller") == 5 + 5

    def test_badge_fuzzy(self):
        product = make_product("Desk Lamp", category="Home", badge="Best Seller")
        assert score_relevance(product, "best sellr") == 3 + 5

    def test_missing_badge_is_ignored(self):
        product = make_product("Desk Lamp", category="Home", badge=None)
        assert score_relevance(product, "seller") == 0


@pytest.mark.unit
class TestBonuses:
    """Multi-token and concise-title bonuses"""

    def test_multi_token_bonus(self):
        product = make_product("Blue Light Blue Shirt")
        # prefix 50 + two matching tokens 10 + concise 5
        assert score_relevance(product, "blue") == 65

    def test_long_titles_get_no_concise_bonus(self):
        product = make_product("Ultra Soft Cotton Bath Towel Set", category="Home")
        assert score_relevance(product, "towel") == 30

    def test_concise_bonus_only_applies_to_matches(self):
        product = make_product("Desk Lamp")
        assert score_relevance(product, "qqqq") == 0


@pytest.mark.unit
class TestScoringProperties:
    """Ordering and determinism guarantees"""

    @pytest.mark.parametrize("title, typo", [
        ("Wireless Headphones", "Wireless Headphonez"),
        ("Cast Iron Skillet", "Cast Iron Skilket"),
        ("Yoga Mat", "Yoga Mst"),
        ("Bluetooth Speaker", "Bluetooth Speeker"),
    ])
    def test_exact_beats_single_typo(self, title, typo):
        product = make_product(title, category="Misc")
        assert score_relevance(product, title) > score_relevance(product, typo)

    def test_scores_are_deterministic(self, sample_catalog):
        first = [score_relevance(p, "bottle") for p in sample_catalog]
        second = [score_relevance(p, "bottle") for p in sample_catalog]
        assert first == second

    def test_scores_are_non_negative(self, sample_catalog):
        for term in ["a", "xyz", "speaker", "best", "kitchen"]:
            assert all(score_relevance(p, term) >= 0 for p in sample_catalog)

    def test_custom_weights_change_points(self, headphones):
        scorer = RelevanceScorer(ScoringWeights(title_exact=1000, concise_title_bonus=0, multi_token_bonus=0))
        assert scorer.score(headphones, "wireless headphones") == 1000

    def test_default_weights_match_packaged_constants(self):
        weights = ScoringWeights()
        assert (weights.title_exact, weights.title_prefix, weights.title_substring) == (100, 50, 30)
        assert (weights.title_token_fuzzy, weights.title_full_fuzzy, weights.title_near_exact) == (25, 20, 15)
        assert (weights.category_exact, weights.category_substring, weights.category_fuzzy) == (20, 10, 8)
        assert (weights.badge_substring, weights.badge_fuzzy) == (5, 3)
        assert (weights.token_fuzzy_threshold, weights.full_title_fuzzy_threshold) == (0.75, 0.70)
        assert (weights.near_exact_threshold, weights.category_fuzzy_threshold) == (0.85, 0.80)
