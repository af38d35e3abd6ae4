"""Post models."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator
from sqlmodel import Column, DateTime, Field, SQLModel

__all__ = ["Post", "PostCreate", "PostPublic", "PostUpdate", "UTCDateTime"]


TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
CONTENT_MIN_LENGTH = 10


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware timestamp column stored in UTC.

    Backends without a native timezone type, SQLite among them, hand values
    back without tzinfo; those are read as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            return value.astimezone(UTC)
        return value

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class _PostBase(SQLModel):
    """Base Post model."""

    title: str = Field(description="Headline of the post.")

    content: str = Field(description="Body text of the post.")


class PostCreate(SQLModel):
    """Post creation model."""

    title: str = Field(
        description="Headline of the post.",
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
    )

    content: str = Field(
        description="Body text of the post.", min_length=CONTENT_MIN_LENGTH
    )


class PostUpdate(PostCreate):
    """Post update model, replaces title and content."""


class PostPublic(_PostBase):
    """Post model returned to readers."""

    id: UUID = Field(description="Unique identifier for the post.")

    created_at: datetime = Field(description="Timestamp when the post was created.")

    updated_at: datetime = Field(
        description="Timestamp when the post was last updated."
    )


class Post(SQLModel, table=True):
    """Post model."""

    __tablename__ = "post"

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique identifier for the post.",
    )

    title: str = Field(description="Headline of the post.")

    content: str = Field(description="Body text of the post.")

    created_at: datetime = Field(
        sa_column=Column(UTCDateTime(), nullable=False, index=True),
        description="Timestamp when the post was created.",
    )

    updated_at: datetime = Field(
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Timestamp when the post was last updated.",
    )
