"""Signup and login endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import Settings, get_async_session, get_settings
from schemas.errors import ErrorResponse
from schemas.user import (
    LoginRequest,
    LoginResponse,
    LoginUser,
    SignupRequest,
    SignupResponse,
)
from services import user_service

router = APIRouter(prefix="/api")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Bad Request"},
    500: {"model": ErrorResponse, "description": "Server Error"},
}


@router.post(
    "/signup",
    response_model=SignupResponse,
    tags=["Signup"],
    summary="Signup the user with email and password",
    response_description="Signup Successful",
    responses=ERROR_RESPONSES,
)
async def signup(
    data: SignupRequest,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> SignupResponse:
    """Create an account. The email must not already be registered."""
    user = await user_service.create_user(
        db, data.email, data.password, settings.bcrypt_rounds,
    )
    return SignupResponse(message="User created", user_id=user.id)


@router.post(
    "/login",
    response_model=LoginResponse,
    tags=["Login"],
    summary="Login the user with email and password",
    response_description="Login Successful",
    responses=ERROR_RESPONSES,
)
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_async_session),
) -> LoginResponse:
    """
    Check the credentials and return the user with its bookmarks.

    Unknown emails and wrong passwords are reported with different messages.
    """
    user = await user_service.authenticate_user(db, data.email, data.password)
    return LoginResponse(message="Login successful", user=LoginUser.model_validate(user))
