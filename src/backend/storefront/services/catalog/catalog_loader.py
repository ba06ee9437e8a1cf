"""
Catalog Loader

Reads the static products feed (and optionally the review blog index) into
Product models for offline tools and scripts.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog
from pydantic import ValidationError

from ...exceptions import CatalogLoadError
from ...models.product import Product

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


def _read_json(path: PathLike) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError(f"catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"invalid JSON in {path}: {e}") from e


def _extract_list(data: Any, key: str, path: PathLike) -> List[Dict[str, Any]]:
    """Feeds wrap their entries as {"<key>": [...]}; bare lists are accepted too"""
    if isinstance(data, dict):
        data = data.get(key) or []
    if not isinstance(data, list):
        raise CatalogLoadError(f"expected a list of {key} in {path}")
    return [entry for entry in data if isinstance(entry, dict)]


def review_urls_by_product(blogs_path: PathLike) -> Dict[str, str]:
    """Map product id -> review page url from the blog index"""
    posts = _extract_list(_read_json(blogs_path), "posts", blogs_path)
    return {
        str(post["productId"]): f"/reviews/{post['slug']}"
        for post in posts
        if post.get("productId") is not None and post.get("slug")
    }


def load_catalog(products_path: PathLike, blogs_path: Optional[PathLike] = None) -> List[Product]:
    """
    Load the product catalog.

    Args:
        products_path: Path to products.json
        blogs_path: Optional path to blogs.json used to link review pages

    Returns:
        Valid products in file order; invalid entries are logged and skipped

    Raises:
        CatalogLoadError: If a file is missing, not JSON or has the wrong layout
    """
    entries = _extract_list(_read_json(products_path), "products", products_path)
    review_urls = review_urls_by_product(blogs_path) if blogs_path else {}

    products = []
    for entry in entries:
        try:
            product = Product.model_validate(entry)
        except ValidationError as e:
            logger.warning("catalog_entry_skipped", product_id=entry.get("id"), errors=e.error_count())
            continue
        review_url = review_urls.get(str(product.id))
        if review_url and not product.review_url:
            product = product.model_copy(update={"review_url": review_url})
        products.append(product)

    logger.info(
        "catalog_loaded",
        path=str(products_path),
        products=len(products),
        skipped=len(entries) - len(products),
        reviews_linked=sum(1 for p in products if p.review_url),
    )
    return products
