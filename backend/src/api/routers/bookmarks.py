"""Bookmark update endpoint."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.errors import ErrorResponse
from schemas.user import BookmarkUpdate, MessageResponse
from services import user_service

router = APIRouter(prefix="/api", tags=["Bookmark"])


@router.put(
    "/bookmark",
    response_model=MessageResponse,
    summary="Update the user bookmarks",
    response_description="Updated Successfully",
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request"},
        500: {"model": ErrorResponse, "description": "Server Error"},
    },
)
async def update_bookmarks(
    data: BookmarkUpdate,
    db: AsyncSession = Depends(get_async_session),
) -> MessageResponse:
    """Replace the user's bookmarks with the given list."""
    await user_service.update_bookmarks(db, data.email, data.bookmarks)
    return MessageResponse(message="Updated Successfully")
