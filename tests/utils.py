"""Helpers for post tests."""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from sqlmodel.ext.asyncio.session import AsyncSession

from newsfeed.post import Post

__all__ = ["BASE_TIME", "add_posts", "make_post"]

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def make_post(
    title: str, content: str = "Body text of the post.", minutes: int = 0
) -> Post:
    """Build a post created ``minutes`` after ``BASE_TIME``."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Post(title=title, content=content, created_at=created, updated_at=created)


async def add_posts(session: AsyncSession, posts: Sequence[Post]) -> list[Post]:
    """Persist ``posts`` and return them."""
    session.add_all(posts)
    await session.commit()
    return list(posts)
