# ruff: noqa: S101

"""Tests for the page navigation window."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from newsfeed.pagination import (
    MAX_FULL_PAGES,
    PAGE_GAP,
    clamp_page,
    page_range,
    page_window,
)

_MAX_WINDOW_LENGTH = 9


@pytest.mark.pagination
@pytest.mark.parametrize(
    ("current", "total", "expected"),
    [
        (5, 10, [1, PAGE_GAP, 3, 4, 5, 6, 7, PAGE_GAP, 10]),
        (1, 3, [1, 2, 3]),
        (1, 1, [1]),
        (4, 7, [1, 2, 3, 4, 5, 6, 7]),
        (7, 7, [1, 2, 3, 4, 5, 6, 7]),
        (1, 8, [1, 2, 3, 4, 5, 6, PAGE_GAP, 8]),
        (4, 8, [1, 2, 3, 4, 5, 6, PAGE_GAP, 8]),
        (5, 8, [1, PAGE_GAP, 3, 4, 5, 6, 7, 8]),
        (8, 8, [1, PAGE_GAP, 3, 4, 5, 6, 7, 8]),
        (1, 10, [1, 2, 3, 4, 5, 6, PAGE_GAP, 10]),
        (3, 10, [1, 2, 3, 4, 5, 6, PAGE_GAP, 10]),
        (4, 10, [1, 2, 3, 4, 5, 6, PAGE_GAP, 10]),
        (8, 10, [1, PAGE_GAP, 5, 6, 7, 8, 9, 10]),
        (10, 10, [1, PAGE_GAP, 5, 6, 7, 8, 9, 10]),
        (50, 100, [1, PAGE_GAP, 48, 49, 50, 51, 52, PAGE_GAP, 100]),
    ],
)
def test_page_window_examples(current: int, total: int, expected: list[int]) -> None:
    """Windows for fixed inputs, including both edges and the 7/8 threshold."""
    assert page_window(current, total) == expected


@pytest.mark.pagination
def test_page_window_without_pages_is_empty() -> None:
    """No pages means nothing to navigate."""
    assert not page_window(1, 0)


@pytest.mark.pagination
@pytest.mark.parametrize(("current", "edge"), [(0, 1), (-3, 1), (11, 10), (99, 10)])
def test_page_window_clamps_out_of_range_current(current: int, edge: int) -> None:
    """An out-of-range current page renders like the nearest valid page."""
    assert page_window(current, 10) == page_window(edge, 10)


@pytest.mark.pagination
def test_clamp_page() -> None:
    """Pages are clamped into the valid range."""
    assert clamp_page(0, 5) == 1
    assert clamp_page(3, 5) == 3
    assert clamp_page(9, 5) == 5
    assert clamp_page(4, 0) == 1


@pytest.mark.pagination
def test_page_range() -> None:
    """Ranges include both ends and are empty when reversed."""
    assert page_range(2, 5) == [2, 3, 4, 5]
    assert page_range(3, 3) == [3]
    assert not page_range(5, 2)


@settings(max_examples=200)
@given(total=st.integers(min_value=1, max_value=MAX_FULL_PAGES), data=st.data())
def test_small_totals_list_every_page(total: int, data: st.DataObject) -> None:
    """Up to seven pages the window is every page, without gaps."""
    current = data.draw(st.integers(min_value=1, max_value=total))

    assert page_window(current, total) == list(range(1, total + 1))


@settings(max_examples=500)
@given(
    total=st.integers(min_value=MAX_FULL_PAGES + 1, max_value=10_000),
    data=st.data(),
)
def test_large_totals_window_shape(total: int, data: st.DataObject) -> None:
    """Large windows keep both ends, stay short and never repeat a gap."""
    current = data.draw(st.integers(min_value=1, max_value=total))

    window = page_window(current, total)
    pages = [page for page in window if page != PAGE_GAP]

    assert window[0] == 1
    assert window[-1] == total
    assert len(window) <= _MAX_WINDOW_LENGTH
    assert current in pages
    assert pages == sorted(set(pages))
    for left, right in zip(window, window[1:], strict=False):
        assert not (left == PAGE_GAP and right == PAGE_GAP)


@settings(max_examples=300)
@given(total=st.integers(min_value=MAX_FULL_PAGES + 1, max_value=500), data=st.data())
def test_gaps_mark_elided_pages(total: int, data: st.DataObject) -> None:
    """A gap sits exactly where consecutive shown pages are not adjacent."""
    current = data.draw(st.integers(min_value=1, max_value=total))

    window = page_window(current, total)

    for index, page in enumerate(window):
        if page == PAGE_GAP:
            assert window[index + 1] - window[index - 1] > 1
        elif index + 1 < len(window) and window[index + 1] != PAGE_GAP:
            assert window[index + 1] == page + 1
