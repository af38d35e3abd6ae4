"""Compact page navigation windows.

A window always shows the first and last page, up to five pages around the
current one, and ``PAGE_GAP`` wherever a range of pages is elided::

    >>> page_window(5, 10)
    [1, -1, 3, 4, 5, 6, 7, -1, 10]
"""

from typing import Final

__all__ = ["MAX_FULL_PAGES", "PAGE_GAP", "clamp_page", "page_range", "page_window"]


PAGE_GAP: Final = -1
"""Marker for an elided range of pages."""

MAX_FULL_PAGES: Final = 7
"""Up to this many pages the window lists every page."""

_INTERIOR_SLOTS: Final = 5


def page_range(start: int, end: int) -> list[int]:
    """Return the pages from ``start`` to ``end`` inclusive."""
    return list(range(start, end + 1))


def clamp_page(current: int, total: int) -> int:
    """Clamp a requested page into ``[1, total]``.

    Args:
        current: Page number supplied by the caller.
        total: Total page count.

    Returns:
        The nearest valid page, 1 when there are no pages at all.
    """
    return max(1, min(current, total))


def page_window(current: int, total: int) -> list[int]:
    """Build the navigation window for ``current`` out of ``total`` pages.

    Args:
        current: Page being displayed. Values outside ``[1, total]`` are
            clamped first.
        total: Total page count.

    Returns:
        Page numbers in ascending order with ``PAGE_GAP`` for elided ranges.
        Empty when ``total`` is below 1.
    """
    if total < 1:
        return []
    if total <= MAX_FULL_PAGES:
        return page_range(1, total)

    current = clamp_page(current, total)
    start = current - 2
    end = current + 2

    if start <= 1:
        start = 2
        end = min(start + _INTERIOR_SLOTS - 1, total - 1)
    elif end >= total:
        end = total - 1
        start = max(2, end - _INTERIOR_SLOTS + 1)

    window = [1]
    if start > 2:  # noqa: PLR2004
        window.append(PAGE_GAP)
    window.extend(page_range(start, end))
    if end < total - 1:
        window.append(PAGE_GAP)
    window.append(total)
    return window
