"""Post repository."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import UTC, datetime
from uuid import UUID

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from newsfeed.common.exceptions import StorageError
from newsfeed.config.errors import ErrorNames
from newsfeed.pagination import PageQuery
from newsfeed.utils.prometheus import STORE_FAILURES

from .exceptions import InvalidPostIdError, PostNotFoundError
from .models import Post, PostCreate, PostUpdate
from .query_builder import build_search_filter

__all__ = [
    "delete_post_db",
    "get_post_db",
    "get_posts_paged_db",
    "parse_post_id",
    "save_post_db",
    "save_posts_db",
    "update_post_db",
]


def parse_post_id(post_id: UUID | str) -> UUID:
    """Convert a caller supplied identifier into a UUID.

    Raises:
        InvalidPostIdError: If the value is not a valid UUID.
    """
    if isinstance(post_id, UUID):
        return post_id
    try:
        return UUID(post_id)
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidPostIdError(str(post_id)) from e


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Re-raise driver failures as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        STORE_FAILURES.labels(operation, "query").inc()
        logger.warning("Content store failure", operation=operation, error=str(e))
        raise StorageError(ErrorNames.QUERY_FAILED) from e


async def get_posts_paged_db(
    db: AsyncSession,
    *,
    page: int = 1,
    limit: int = 0,
    search: str = "",
) -> tuple[Sequence[Post], int]:
    """Fetch one page of posts, newest first.

    Posts are ordered by creation time descending with the ID as tie-breaker,
    so posts created in the same instant keep a stable order across pages.

    Args:
        db: Database session instance.
        page: Page number, starts at 1. Ignored when ``limit`` is 0. Pages
            whose offset would overflow the store read as the furthest page
            that fits.
        limit: Maximum number of posts to return, 0 returns every match.
        search: Case-insensitive substring matched against title and content.

    Returns:
        The posts of the requested page and the number of posts matching
        ``search`` across all pages.

    Raises:
        StorageError: If the store cannot execute the query.
    """
    condition = build_search_filter(search)

    stmt = select(Post).order_by(col(Post.created_at).desc(), col(Post.id).desc())
    total_stmt = select(func.count()).select_from(Post)
    if condition is not None:
        stmt = stmt.where(condition)
        total_stmt = total_stmt.where(condition)

    if limit > 0:
        offset = PageQuery(page=page, limit=limit).offset
        stmt = stmt.offset(offset).limit(limit)

    with _storage_errors("find"):
        posts = (await db.exec(stmt)).all()
        total: int = await db.scalar(total_stmt) or 0

    logger.debug(
        "Posts retrieved",
        page=page,
        limit=limit,
        search=search,
        items=len(posts),
        total=total,
    )
    return posts, total


async def get_post_db(db: AsyncSession, post_id: UUID | str) -> Post:
    """Retrieve a post by its ID.

    Args:
        db: Database session instance.
        post_id: The ID of the post to retrieve.

    Returns:
        Post: The post with the given ID.

    Raises:
        InvalidPostIdError: If the ID is malformed.
        PostNotFoundError: If the post does not exist.
    """
    key = parse_post_id(post_id)
    with _storage_errors("find_by_id"):
        post = (await db.exec(select(Post).where(Post.id == key))).first()

    if post is None:
        raise PostNotFoundError(key)

    return post


async def save_post_db(db: AsyncSession, data: PostCreate) -> Post:
    """Insert a new post.

    Args:
        db: Database session instance.
        data: Title and content of the new post.

    Returns:
        Post: The stored post, including its generated ID and timestamps.
    """
    now = datetime.now(tz=UTC)
    post = Post(title=data.title, content=data.content, created_at=now, updated_at=now)

    with _storage_errors("insert"):
        db.add(post)
        await db.commit()
        await db.refresh(post)

    logger.debug("Post saved to DB", post_id=post.id)
    return post


async def save_posts_db(db: AsyncSession, items: Sequence[PostCreate]) -> list[UUID]:
    """Insert several posts sharing one creation timestamp.

    Args:
        db: Database session instance.
        items: Posts to insert. An empty sequence is a no-op.

    Returns:
        The IDs of the inserted posts, in input order.
    """
    if not items:
        return []

    now = datetime.now(tz=UTC)
    posts = [
        Post(title=item.title, content=item.content, created_at=now, updated_at=now)
        for item in items
    ]

    ids = [post.id for post in posts]

    with _storage_errors("insert_many"):
        db.add_all(posts)
        await db.commit()

    logger.debug("Posts saved to DB", count=len(ids))
    return ids


async def update_post_db(
    db: AsyncSession, post_id: UUID | str, update_data: PostUpdate
) -> Post:
    """Replace title and content of an existing post.

    Args:
        db: Database session instance.
        post_id: The ID of the post to update.
        update_data: New title and content.

    Returns:
        Post: The updated post.

    Raises:
        InvalidPostIdError: If the ID is malformed.
        PostNotFoundError: If the post does not exist.
    """
    post = await get_post_db(db, post_id)

    for field, value in update_data.model_dump(exclude_unset=True).items():
        setattr(post, field, value)
    post.updated_at = datetime.now(tz=UTC)

    with _storage_errors("update"):
        await db.commit()
        await db.refresh(post)

    logger.debug("Post updated", post_id=post.id)
    return post


async def delete_post_db(db: AsyncSession, post_id: UUID | str) -> None:
    """Delete a post by its ID.

    Args:
        db: Database session instance.
        post_id: The ID of the post to delete.

    Raises:
        InvalidPostIdError: If the ID is malformed.
        PostNotFoundError: If the post does not exist.
    """
    post = await get_post_db(db, post_id)
    key = post.id

    with _storage_errors("delete"):
        await db.delete(post)
        await db.commit()

    logger.debug("Post deleted", post_id=key)
