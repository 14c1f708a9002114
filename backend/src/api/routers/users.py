"""User listing endpoint."""
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import Settings, get_async_session, get_settings
from schemas.errors import ErrorResponse
from schemas.user import UserSummary
from services import user_service

router = APIRouter(prefix="/api", tags=["Users"])


@router.get(
    "/users",
    summary="Get all users",
    response_model=None,
    responses={
        200: {"model": list[UserSummary], "description": "Fetched Successfully"},
        500: {"model": ErrorResponse, "description": "Server Error"},
    },
)
async def list_users(
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> list[dict[str, Any]]:
    """
    List every user.

    Passwords are never returned. Which of `email` and `bookmarks` are left out
    is controlled by the `USER_LIST_EXCLUDE_FIELDS` setting.
    """
    users = await user_service.list_users(db)
    exclude = set(settings.user_list_exclude_fields)
    return [
        UserSummary.model_validate(user).model_dump(mode="json", exclude=exclude)
        for user in users
    ]
