"""Post router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from newsfeed.config.config import settings
from newsfeed.config.db import get_session

from .models import PostCreate, PostPublic, PostUpdate
from .repository import (
    delete_post_db,
    get_post_db,
    save_post_db,
    save_posts_db,
    update_post_db,
)
from .sample_posts import generate_sample_posts
from .schemas import PostPage
from .service import get_post_page_svc

__all__ = ["router"]


router = APIRouter(tags=["Post"])


@router.get("", summary="List posts")
async def list_posts(
    db: Annotated[AsyncSession, Depends(get_session)],
    page: Annotated[
        str | None, Query(description="Page number, starts at 1")
    ] = None,
    limit: Annotated[
        int | None, Query(ge=0, le=1000, description="Items per page, 0 for all")
    ] = None,
    search: Annotated[
        str, Query(max_length=200, description="Search in title and content")
    ] = "",
) -> PostPage:
    """Returns one page of posts, newest first.

    Args:
        db: Database session.
        page: The page number. Missing or invalid values read as 1.
        limit: The page size. Defaults to the configured posts per page.
        search: Optional case-insensitive search term.

    Returns:
        PostPage: Posts of the page with page count and navigation window.

    Raises:
        StorageError: If the content store fails or the query times out.
    """
    page_size = settings.posts_per_page if limit is None else limit
    response = await get_post_page_svc(db, page, page_size, search)
    logger.debug(
        "Posts listed",
        page=response.page,
        limit=response.limit,
        totalpages=response.totalpages,
        items_count=len(response.items),
    )
    return response


@router.post("", summary="Create a post", status_code=status.HTTP_201_CREATED)
async def create_post(
    data: PostCreate,
    request: Request,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> PostPublic:
    """Create a new post.

    Args:
        data: Title and content of the post.
        request: The HTTP request object.
        response: FastAPI response object for setting headers.
        db: Database session.

    Returns:
        The created post, with a Location header pointing to it.
    """
    post = await save_post_db(db, data)
    response.headers["Location"] = f"{request.url.path}/{post.id}"
    logger.debug("Post created", post_id=post.id)
    return PostPublic.model_validate(post)


@router.post("/seed", summary="Insert sample posts")
async def seed_posts(db: Annotated[AsyncSession, Depends(get_session)]) -> Response:
    """Insert a batch of sample posts.

    Returns:
        201 Created with the number of inserted posts in ``X-Seeded-Count``.
    """
    ids = await save_posts_db(db, generate_sample_posts(settings.seed_batch_size))
    logger.debug("Sample posts inserted", count=len(ids))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"X-Seeded-Count": str(len(ids))},
    )


@router.get("/{post_id}", summary="Get post by ID")
async def get_post(
    post_id: str, db: Annotated[AsyncSession, Depends(get_session)]
) -> PostPublic:
    """Retrieve a single post by its ID.

    Raises:
        InvalidPostIdError: If the ID is malformed.
        PostNotFoundError: If the post does not exist.
    """
    post = await get_post_db(db, post_id)
    return PostPublic.model_validate(post)


@router.put("/{post_id}", summary="Update post by ID")
async def update_post(
    post_id: str,
    data: PostUpdate,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Replace title and content of a post.

    Returns:
        204 No Content response with Location header.

    Raises:
        InvalidPostIdError: If the ID is malformed.
        PostNotFoundError: If the post does not exist.
    """
    await update_post_db(db, post_id, data)
    logger.debug("Post updated", post_id=post_id)

    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers={"Location": f"{request.url.path}"},
    )


@router.delete("/{post_id}", summary="Delete post by ID")
async def delete_post(
    post_id: str, db: Annotated[AsyncSession, Depends(get_session)]
) -> Response:
    """Delete a post by its ID.

    Returns:
        204 No Content if deletion is successful.

    Raises:
        InvalidPostIdError: If the ID is malformed.
        PostNotFoundError: If the post does not exist.
    """
    await delete_post_db(db, post_id)
    logger.debug("Post deleted", post_id=post_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
