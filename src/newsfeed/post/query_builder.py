"""Filter construction for post listings."""

from sqlalchemy import ColumnElement, or_
from sqlmodel import col

from .models import Post

__all__ = ["build_search_filter"]


def build_search_filter(search: str) -> ColumnElement[bool] | None:
    """Build the filter matching ``search`` against title or content.

    The term is matched as a case-insensitive substring. LIKE wildcards in
    the term are escaped, so ``50%`` only matches the literal text ``50%``.

    Args:
        search: Search term, empty for no filtering.

    Returns:
        SQLAlchemy condition, or None to match every post.
    """
    if not search:
        return None

    return or_(
        col(Post.title).icontains(search, autoescape=True),
        col(Post.content).icontains(search, autoescape=True),
    )
