"""
Pytest configuration and shared fixtures
Provides common test fixtures for all test modules
"""

import json
import sys
from pathlib import Path

import pytest

# Add backend directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storefront.models import Product


@pytest.fixture
def test_config_dir(tmp_path):
    """
    Temporary config directory with a small-page search configuration
    """
    config = {
        "version": "test",
        "description": "Test search configuration",
        "listing": {
            "page_size": 2,
            "default_max_price": 300,
            "price_step": 25
        },
        "scoring": {
            "title_exact": 100,
            "title_prefix": 50,
            "title_substring": 30,
            "title_token_fuzzy": 25,
            "title_full_fuzzy": 20,
            "title_near_exact": 15,
            "category_exact": 20,
            "category_substring": 10,
            "category_fuzzy": 8,
            "badge_substring": 5,
            "badge_fuzzy": 3,
            "multi_token_bonus": 10,
            "concise_title_bonus": 0
        },
        "thresholds": {
            "token_fuzzy_threshold": 0.75,
            "full_title_fuzzy_threshold": 0.70,
            "near_exact_threshold": 0.85,
            "category_fuzzy_threshold": 0.80,
            "badge_fuzzy_threshold": 0.80,
            "min_fuzzy_token_length": 3,
            "min_full_title_term_length": 4,
            "concise_title_max_tokens": 5
        }
    }
    (tmp_path / "search_config.json").write_text(json.dumps(config))
    return tmp_path


@pytest.fixture
def headphones():
    """Single product used by the relevance scenarios"""
    return Product(
        id=1,
        title="Wireless Headphones",
        category="Electronics",
        price=50,
        rating=4.5,
        reviews=100
    )


@pytest.fixture
def sample_catalog():
    """Small mixed catalog covering categories, badges and discounts"""
    return [
        Product(id=1, title="Wireless Headphones", category="Electronics", price=50,
                listPrice=80, rating=4.5, reviews=100, badge="Best Seller",
                lastUpdated="2024-03-01T10:00:00Z"),
        Product(id=2, title="Bluetooth Speaker", category="Electronics", price=35,
                rating=4.1, reviews=2500, lastUpdated="2024-05-12T08:30:00Z"),
        Product(id=3, title="Stainless Steel Water Bottle", category="Kitchen", price=18,
                listPrice=25, rating=4.8, reviews=900, badge="Amazon's Choice",
                lastUpdated="2024-01-20T12:00:00Z"),
        Product(id=4, title="Cast Iron Skillet", category="Kitchen", price=42,
                rating=4.7, reviews=15000, badge="Best Seller"),
        Product(id=5, title="Yoga Mat", category="Fitness", price=25, listPrice=30,
                rating=3.9, reviews=40, lastUpdated="2023-11-02T09:00:00Z"),
        Product(id=6, title="Adjustable Dumbbells", category="Fitness", price=199,
                rating=4.6, reviews=800),
    ]


# Pytest markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "config: Configuration system tests")
    config.addinivalue_line("markers", "services: Service layer tests")


# Auto-use fixtures
@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset singleton instances before each test
    Ensures test isolation
    """
    import storefront.services.config.configuration_service as config_module
    config_module._config_service = None
    config_module.ConfigurationService.load_config.cache_clear()

    yield

    config_module._config_service = None
    config_module.ConfigurationService.load_config.cache_clear()
