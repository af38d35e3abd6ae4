"""Pagination helpers independent of storage and rendering."""

from .page_count import total_pages
from .page_window import (
    MAX_FULL_PAGES,
    PAGE_GAP,
    clamp_page,
    page_range,
    page_window,
)
from .query import MAX_OFFSET, PageQuery

__all__ = [
    "MAX_FULL_PAGES",
    "MAX_OFFSET",
    "PAGE_GAP",
    "PageQuery",
    "clamp_page",
    "page_range",
    "page_window",
    "total_pages",
]
