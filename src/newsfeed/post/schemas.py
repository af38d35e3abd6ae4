"""Post page response model."""

from collections.abc import Sequence

from pydantic import BaseModel

from .models import PostPublic

__all__ = ["PostPage"]


class PostPage(BaseModel):
    """One page of posts with its navigation window."""

    page: int
    limit: int
    totalpages: int
    window: list[int]
    items: Sequence[PostPublic]
