"""Normalized page request."""

from pydantic import BaseModel, Field, field_validator, model_validator

__all__ = ["MAX_OFFSET", "PageQuery"]


# Largest row offset a signed 64-bit SQL integer holds
MAX_OFFSET = 2**63 - 1


class PageQuery(BaseModel):
    """Page request for a listing.

    Out-of-range values are normalized instead of rejected: a non-positive
    page becomes 1, a negative limit becomes 0 (unpaged) and a blank search
    term disables filtering. Pages so far out that their offset would not
    fit the store's integer type are pulled back to the furthest page that
    does, which is still past the end of any real listing.
    """

    page: int = Field(default=1, description="Page number, starts at 1.")
    limit: int = Field(default=0, description="Items per page, 0 returns all.")
    search: str = Field(default="", description="Case-insensitive substring.")

    @field_validator("page", mode="before")
    @classmethod
    def _default_page(cls, value: object) -> int:
        try:
            page = int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return 1
        return max(page, 1)

    @field_validator("limit", mode="before")
    @classmethod
    def _non_negative_limit(cls, value: object) -> int:
        if value is None:
            return 0
        return max(int(value), 0)  # type: ignore[call-overload]

    @field_validator("search", mode="before")
    @classmethod
    def _blank_search(cls, value: object) -> str:
        if value is None or not str(value).strip():
            return ""
        return str(value)

    @model_validator(mode="after")
    def _offset_in_range(self) -> "PageQuery":
        if self.limit > 0:
            self.page = min(self.page, MAX_OFFSET // self.limit + 1)
        return self

    @property
    def offset(self) -> int:
        """Rows to skip before this page, 0 when unpaged."""
        if self.limit <= 0:
            return 0
        return (self.page - 1) * self.limit
