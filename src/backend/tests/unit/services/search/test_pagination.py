"""
Unit tests for pagination
"""

import pytest

from storefront.services.search.pagination import iter_pages, paginate


@pytest.mark.unit
class TestPaginate:
    """Slicing an ordered list into 1-based pages"""

    def test_first_page(self):
        page = paginate(list(range(30)), page=1, page_size=12)
        assert page.items == list(range(12))
        assert page.total == 30
        assert page.total_pages == 3
        assert page.has_more is True
        assert (page.start_index, page.end_index) == (0, 12)

    def test_last_partial_page(self):
        page = paginate(list(range(30)), page=3, page_size=12)
        assert page.items == list(range(24, 30))
        assert page.has_more is False
        assert (page.start_index, page.end_index) == (24, 30)

    def test_page_past_end_is_empty(self):
        page = paginate(list(range(5)), page=4, page_size=2)
        assert page.items == []
        assert page.total_pages == 3
        assert page.has_more is False

    def test_page_below_one_clamps(self):
        assert paginate(list(range(5)), page=0, page_size=2).page == 1
        assert paginate(list(range(5)), page=-3, page_size=2).items == [0, 1]

    def test_empty_list(self):
        page = paginate([], page=1, page_size=12)
        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_non_positive_page_size_raises(self, page_size):
        with pytest.raises(ValueError):
            paginate([1, 2, 3], page=1, page_size=page_size)


@pytest.mark.unit
class TestIterPages:
    """Walking every page"""

    @pytest.mark.parametrize("size, page_size", [(0, 12), (1, 12), (12, 12), (13, 12), (30, 7)])
    def test_pages_cover_list_exactly_once(self, size, page_size):
        items = list(range(size))
        pages = list(iter_pages(items, page_size))
        assert [item for page in pages for item in page.items] == items
        assert [page.page for page in pages] == list(range(1, len(pages) + 1))

    def test_non_positive_page_size_raises(self):
        with pytest.raises(ValueError):
            list(iter_pages([1, 2], 0))
