"""Post service."""

import asyncio
from collections.abc import Sequence

from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from newsfeed.config.config import settings
from newsfeed.pagination import PageQuery, clamp_page, page_window, total_pages
from newsfeed.utils.deadline import run_with_deadline

from .models import Post, PostPublic
from .repository import get_posts_paged_db
from .schemas import PostPage

__all__ = ["get_post_page_svc", "list_page"]


async def list_page(
    db: AsyncSession,
    page: int,
    limit: int,
    search: str = "",
    *,
    timeout: float | None = None,
    cancel_event: asyncio.Event | None = None,
) -> tuple[Sequence[Post], int]:
    """Fetch one page of posts and the total page count.

    A page beyond the last one yields no items but the correct page count.

    Args:
        db: Database session instance.
        page: Page number, non-positive values read as 1.
        limit: Page size, 0 returns every matching post on a single page.
        search: Case-insensitive substring over title and content.
        timeout: Deadline in seconds, defaults to ``settings.query_timeout``.
        cancel_event: Set by the caller to abandon the fetch.

    Returns:
        The posts of the page and the total number of pages (at least 1).

    Raises:
        StorageError: If the store fails, the deadline passes or the caller
            cancels.
    """
    query = PageQuery(page=page, limit=limit, search=search)
    posts, total = await run_with_deadline(
        get_posts_paged_db(db, page=query.page, limit=query.limit, search=query.search),
        timeout=settings.query_timeout if timeout is None else timeout,
        cancel_event=cancel_event,
        operation="list_page",
    )
    return posts, total_pages(total, query.limit)


async def get_post_page_svc(
    db: AsyncSession, page: int | str | None, limit: int, search: str = ""
) -> PostPage:
    """Build the listing response for a page request.

    The page number reported back and used for the window is clamped into
    the valid range.
    """
    query = PageQuery(page=page, limit=limit, search=search)
    posts, pages = await list_page(db, query.page, query.limit, query.search)
    current = clamp_page(query.page, pages)

    if current != query.page:
        logger.debug("Requested page clamped", requested=query.page, page=current)

    return PostPage(
        page=current,
        limit=query.limit,
        totalpages=pages,
        window=page_window(current, pages),
        items=[PostPublic.model_validate(post) for post in posts],
    )
