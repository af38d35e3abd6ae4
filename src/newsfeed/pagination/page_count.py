"""Total page count for a paged listing."""

__all__ = ["total_pages"]


def total_pages(count: int, limit: int) -> int:
    """Number of pages needed to show ``count`` items, ``limit`` per page.

    An unpaged listing (``limit <= 0``) and an empty result both have exactly
    one page, so the result is never 0.

    Args:
        count: Number of items matching the query.
        limit: Page size.

    Returns:
        The total page count, at least 1.
    """
    if limit <= 0 or count <= 0:
        return 1
    return (count + limit - 1) // limit
