# ruff: noqa: S101

"""Tests for the post repository."""

from uuid import uuid4

import pytest
from prometheus_client import REGISTRY
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from newsfeed.common.exceptions import StorageError
from newsfeed.post import (
    InvalidPostIdError,
    PostCreate,
    PostNotFoundError,
    PostUpdate,
    delete_post_db,
    get_post_db,
    get_posts_paged_db,
    save_post_db,
    save_posts_db,
    update_post_db,
)
from tests.utils import add_posts, make_post


@pytest.mark.posts
async def test_search_is_case_insensitive_substring(session: AsyncSession) -> None:
    """Only posts containing the term in any casing match."""
    await add_posts(
        session,
        [make_post("Test Post", minutes=1), make_post("Other", minutes=2)],
    )

    posts, total = await get_posts_paged_db(session, page=1, limit=10, search="test")

    assert [post.title for post in posts] == ["Test Post"]
    assert total == 1


@pytest.mark.posts
async def test_search_matches_content(session: AsyncSession) -> None:
    """The term is also matched against the body."""
    await add_posts(
        session,
        [
            make_post("First", content="Nothing to see in here.", minutes=1),
            make_post("Second", content="Markets RALLY after the news.", minutes=2),
        ],
    )

    posts, total = await get_posts_paged_db(session, limit=10, search="rally")

    assert [post.title for post in posts] == ["Second"]
    assert total == 1


@pytest.mark.posts
@pytest.mark.parametrize(
    ("term", "expected"), [("0%", ["100% growth"]), ("a_b", ["a_b"])]
)
async def test_search_treats_wildcards_literally(
    session: AsyncSession, term: str, expected: list[str]
) -> None:
    """LIKE wildcards in the term match only themselves."""
    await add_posts(
        session,
        [
            make_post("100% growth", minutes=1),
            make_post("1000 growth", minutes=2),
            make_post("a_b", minutes=3),
            make_post("axb", minutes=4),
        ],
    )

    posts, _ = await get_posts_paged_db(session, limit=10, search=term)

    assert [post.title for post in posts] == expected


@pytest.mark.posts
async def test_newest_first_with_id_tie_breaker(session: AsyncSession) -> None:
    """Posts sort by creation time, ties by ID, both descending."""
    tied = [make_post(f"Tied {i}", minutes=5) for i in range(4)]
    await add_posts(session, [make_post("Old", minutes=0), *tied, make_post("New", 9)])

    posts, total = await get_posts_paged_db(session)

    expected_tied = [p.title for p in sorted(tied, key=lambda p: p.id, reverse=True)]
    assert [post.title for post in posts] == ["New", *expected_tied, "Old"]
    assert total == 6


@pytest.mark.posts
async def test_pages_split_results(session: AsyncSession) -> None:
    """Skip and limit cut the ordered result, the total stays the same."""
    await add_posts(session, [make_post(f"Post {i:02}", minutes=i) for i in range(25)])

    first, total = await get_posts_paged_db(session, page=1, limit=10)
    last, _ = await get_posts_paged_db(session, page=3, limit=10)
    beyond, beyond_total = await get_posts_paged_db(session, page=4, limit=10)

    assert total == 25
    assert [post.title for post in first] == [f"Post {i:02}" for i in range(24, 14, -1)]
    assert [post.title for post in last] == [f"Post {i:02}" for i in range(4, -1, -1)]
    assert not beyond
    assert beyond_total == 25


@pytest.mark.posts
async def test_offset_overflow_is_empty_page(session: AsyncSession) -> None:
    """Page numbers too large for an SQL offset give an empty page."""
    await add_posts(session, [make_post(f"Post {i}", minutes=i) for i in range(5)])

    posts, total = await get_posts_paged_db(session, page=10**19, limit=10)

    assert not posts
    assert total == 5


@pytest.mark.posts
async def test_zero_limit_returns_everything(session: AsyncSession) -> None:
    """An unpaged fetch ignores the page number."""
    await add_posts(session, [make_post(f"Post {i}", minutes=i) for i in range(15)])

    posts, total = await get_posts_paged_db(session, page=5, limit=0)

    assert len(posts) == 15
    assert total == 15


@pytest.mark.posts
async def test_empty_store_is_not_an_error(session: AsyncSession) -> None:
    """No matches is a valid, empty result."""
    posts, total = await get_posts_paged_db(session, page=1, limit=10, search="none")

    assert not posts
    assert total == 0


@pytest.mark.posts
async def test_missing_table_raises_storage_error() -> None:
    """Query failures surface as StorageError and are counted."""
    labels = {"operation": "find", "kind": "query"}
    before = REGISTRY.get_sample_value("newsfeed_store_failures_total", labels) or 0
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    try:
        async with AsyncSession(engine) as broken:
            with pytest.raises(StorageError):
                await get_posts_paged_db(broken, page=1, limit=10)
    finally:
        await engine.dispose()

    after = REGISTRY.get_sample_value("newsfeed_store_failures_total", labels)
    assert after == before + 1


@pytest.mark.posts
async def test_save_and_get_post(session: AsyncSession) -> None:
    """A saved post can be read back by ID."""
    saved = await save_post_db(
        session, PostCreate(title="Fresh", content="Brand new content here.")
    )

    loaded = await get_post_db(session, str(saved.id))

    assert loaded.id == saved.id
    assert loaded.title == "Fresh"
    assert loaded.created_at == loaded.updated_at


@pytest.mark.posts
async def test_save_many_shares_timestamp(session: AsyncSession) -> None:
    """Posts inserted together share their creation time."""
    ids = await save_posts_db(
        session,
        [PostCreate(title=f"Batch {i}", content="Batch body text.") for i in range(3)],
    )

    posts, total = await get_posts_paged_db(session)

    assert total == 3
    assert {post.id for post in posts} == set(ids)
    assert len({post.created_at for post in posts}) == 1
    assert [post.id for post in posts] == sorted(ids, reverse=True)


@pytest.mark.posts
async def test_save_many_empty_is_noop(session: AsyncSession) -> None:
    """Inserting nothing stores nothing."""
    assert await save_posts_db(session, []) == []


@pytest.mark.posts
async def test_update_post(session: AsyncSession) -> None:
    """Updates replace title and content and refresh the update time."""
    [post] = await add_posts(session, [make_post("Before")])
    created_at = post.created_at

    updated = await update_post_db(
        session, post.id, PostUpdate(title="After", content="Rewritten body text.")
    )

    assert updated.title == "After"
    assert updated.content == "Rewritten body text."
    assert updated.created_at == created_at
    assert updated.updated_at > created_at
    assert updated.updated_at.tzinfo is not None


@pytest.mark.posts
async def test_delete_post(session: AsyncSession) -> None:
    """Deleted posts are gone."""
    [post] = await add_posts(session, [make_post("Doomed")])

    await delete_post_db(session, post.id)

    with pytest.raises(PostNotFoundError):
        await get_post_db(session, post.id)


@pytest.mark.posts
@pytest.mark.parametrize("operation", ["get", "update", "delete"])
async def test_unknown_id_not_found(session: AsyncSession, operation: str) -> None:
    """By-ID operations report unknown IDs as not found."""
    post_id = uuid4()
    with pytest.raises(PostNotFoundError):
        if operation == "get":
            await get_post_db(session, post_id)
        elif operation == "update":
            await update_post_db(
                session, post_id, PostUpdate(title="Nope", content="Never stored.")
            )
        else:
            await delete_post_db(session, post_id)


@pytest.mark.posts
@pytest.mark.parametrize("post_id", ["not-a-uuid", "", "1234"])
async def test_malformed_id_rejected(session: AsyncSession, post_id: str) -> None:
    """Malformed IDs are a validation error, not a lookup miss."""
    with pytest.raises(InvalidPostIdError):
        await get_post_db(session, post_id)
