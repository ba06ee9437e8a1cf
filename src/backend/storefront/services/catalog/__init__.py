"""Catalog loading"""

from .catalog_loader import load_catalog, review_urls_by_product

__all__ = [
    "load_catalog",
    "review_urls_by_product",
]
