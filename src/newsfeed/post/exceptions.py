"""Post exceptions."""

from uuid import UUID

from newsfeed.common.exceptions import NotFoundError, ValidationError

__all__ = ["InvalidPostIdError", "PostNotFoundError"]


class PostNotFoundError(NotFoundError):
    """Exception raised when no post has the given ID."""

    def __init__(self, post_id: UUID | str) -> None:
        """Initialize with the post ID."""
        super().__init__(f"Post with ID {post_id} not found")


class InvalidPostIdError(ValidationError):
    """Exception raised when a post ID is not a valid identifier."""

    def __init__(self, post_id: str) -> None:
        """Initialize with the rejected value."""
        super().__init__(f"Invalid post ID {post_id!r}")
