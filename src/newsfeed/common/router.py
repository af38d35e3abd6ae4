"""Common router."""

from fastapi import APIRouter, Response, status
from fastapi.responses import RedirectResponse

__all__ = ["router"]


router = APIRouter(tags=["Common", "Health"])


@router.get("/", include_in_schema=False, summary="Root endpoint")
async def root() -> RedirectResponse:
    """Redirect to the post listing."""
    return RedirectResponse("/posts", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/health", include_in_schema=False, summary="Health check endpoint")
async def health() -> Response:
    """Health check endpoint."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
