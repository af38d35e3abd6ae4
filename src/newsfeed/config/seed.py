"""Seed the database with initial data."""

from loguru import logger
from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from newsfeed.config.config import settings
from newsfeed.post.models import Post
from newsfeed.post.repository import save_posts_db
from newsfeed.post.sample_posts import generate_sample_posts

__all__ = ["seed_db"]


async def seed_db(session: AsyncSession, count: int | None = None) -> int:
    """Insert sample posts into an empty database.

    Args:
        session: The SQLModel async database session.
        count: Number of posts to insert, defaults to
            ``settings.seed_on_start_count``.

    Returns:
        The number of inserted posts, 0 if the database already had posts.
    """
    existing = await session.scalar(select(func.count()).select_from(Post))
    if existing:
        logger.debug("Database already seeded", posts=existing)
        return 0

    count = settings.seed_on_start_count if count is None else count
    ids = await save_posts_db(session, generate_sample_posts(count))
    logger.info("Database seeded", posts=len(ids))
    return len(ids)
