"""
Pagination over an ordered result list (1-based pages)
"""

import math
from dataclasses import dataclass
from typing import Generic, Iterator, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One contiguous slice of an ordered list"""
    items: List[T]
    page: int
    page_size: int
    total: int
    total_pages: int
    start_index: int
    end_index: int
    has_more: bool = False


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if total else 0


def paginate(items: Sequence[T], page: int = 1, page_size: int = 12) -> Page[T]:
    """
    Slice items for the requested page.

    Args:
        items: Fully ordered items
        page: 1-based page number; values below 1 are treated as 1
        page_size: Items per page

    Returns:
        Page with the slice and totals. A page past the end is empty.

    Raises:
        ValueError: If page_size is not positive
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")

    page = max(int(page), 1)
    total = len(items)
    start = (page - 1) * page_size
    end = min(start + page_size, total)

    return Page(
        items=list(items[start:end]),
        page=page,
        page_size=page_size,
        total=total,
        total_pages=total_pages(total, page_size),
        start_index=min(start, total),
        end_index=end,
        has_more=end < total,
    )


def iter_pages(items: Sequence[T], page_size: int = 12) -> Iterator[Page[T]]:
    """Yield every page of items in order"""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    for page in range(1, total_pages(len(items), page_size) + 1):
        yield paginate(items, page, page_size)
