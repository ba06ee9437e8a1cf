#!/usr/bin/env python3
"""
Run a listing-page search against a catalog file and print the results.

Usage:
    python scripts/search_catalog.py data/products.json --search "hedphones"
    python scripts/search_catalog.py data/products.json --category Electronics \
        --sort discount --max-price 100 --page 2
"""

import argparse
import sys
from pathlib import Path

# Add backend to path
backend_path = Path(__file__).parent.parent / "src" / "backend"
sys.path.insert(0, str(backend_path))

from storefront.exceptions import StorefrontSearchError
from storefront.models import SortMode
from storefront.services.catalog import load_catalog
from storefront.services.search import ProductSearchService
from storefront.utils import configure_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Search a product catalog the way the listing page does")
    parser.add_argument("products", help="Path to products.json")
    parser.add_argument("--blogs", help="Path to blogs.json (links review pages)")
    parser.add_argument("--search", default="", help="Free-text search term")
    parser.add_argument("--category", default=None, help="Restrict to one category")
    parser.add_argument("--min-price", type=float, default=None)
    parser.add_argument("--max-price", type=float, default=None)
    parser.add_argument("--min-rating", type=float, default=0.0)
    parser.add_argument("--badge", action="append", default=[], help="Badge to include (repeatable)")
    parser.add_argument(
        "--sort",
        default=SortMode.DEFAULT.value,
        choices=[mode.value for mode in SortMode],
        help="Sort mode (ignored when searching)",
    )
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--facets", action="store_true", help="Print available categories and badges")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        products = load_catalog(args.products, args.blogs)
        service = ProductSearchService()
    except StorefrontSearchError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    defaults = service.default_criteria(products)
    criteria = defaults.with_changes(
        search_term=args.search,
        category=args.category,
        price_range=[
            args.min_price if args.min_price is not None else defaults.price_range.min,
            args.max_price if args.max_price is not None else defaults.price_range.max,
        ],
        min_rating=args.min_rating,
        selected_badges=args.badge,
        sort_mode=args.sort,
        page=args.page,
    )

    if args.facets:
        facets = service.facets(products)
        print(f"Categories: {', '.join(facets['categories'])}")
        print(f"Badges:     {', '.join(facets['badges']) or '-'}")
        print(f"Max price:  {facets['max_price']:.0f}")
        print()

    results = service.search(products, criteria)

    print(f"{results.total} products | page {results.page}/{max(results.total_pages, 1)}")
    print("-" * 80)
    for product in results.items:
        score = results.scores.get(str(product.id), 0)
        badge = f" [{product.badge}]" if product.badge else ""
        print(
            f"{score:>6.1f}  ${product.price:>8.2f}  {product.rating:.1f}★ ({product.reviews})  "
            f"{product.title}{badge}"
        )
    if not results.items:
        print("No products found")
    return 0


if __name__ == "__main__":
    sys.exit(main())
