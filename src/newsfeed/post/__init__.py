"""Post module."""

from .exceptions import InvalidPostIdError, PostNotFoundError
from .models import Post, PostCreate, PostPublic, PostUpdate
from .repository import (
    delete_post_db,
    get_post_db,
    get_posts_paged_db,
    save_post_db,
    save_posts_db,
    update_post_db,
)
from .service import get_post_page_svc, list_page

__all__ = [
    "InvalidPostIdError",
    "Post",
    "PostCreate",
    "PostNotFoundError",
    "PostPublic",
    "PostUpdate",
    "delete_post_db",
    "get_post_db",
    "get_post_page_svc",
    "get_posts_paged_db",
    "list_page",
    "save_post_db",
    "save_posts_db",
    "update_post_db",
]
