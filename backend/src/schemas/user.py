"""Pydantic schemas for user account and bookmark endpoints."""
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator
from pydantic_core import PydanticCustomError

from core.security import MAX_PASSWORD_BYTES


BookmarkId = Annotated[str, StringConstraints(min_length=1)]


def validate_password(password: str) -> str:
    """Require a non-empty password that bcrypt can hash without truncation."""
    if not password:
        raise PydanticCustomError("required", "required")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise PydanticCustomError(
            "password_too_long",
            "must be at most {max_bytes} bytes",
            {"max_bytes": MAX_PASSWORD_BYTES},
        )
    return password


class Credentials(BaseModel):
    """Schema for signup and login payloads."""

    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        """Validate password presence and length."""
        return validate_password(v)


class SignupRequest(Credentials):
    """Schema for creating a new user."""


class LoginRequest(Credentials):
    """Schema for logging in an existing user."""


class BookmarkUpdate(BaseModel):
    """
    Schema for replacing a user's bookmarks.

    The list is stored exactly as given: order and duplicates are preserved.
    """

    email: EmailStr
    bookmarks: list[BookmarkId]


class UserSummary(BaseModel):
    """Schema for users in the list endpoint (never includes the password)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    bookmarks: list[str]


class LoginUser(BaseModel):
    """Schema for the user returned by a successful login."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    bookmarks: list[str]


class SignupResponse(BaseModel):
    """Schema for a successful signup."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: UUID = Field(alias="userId")


class LoginResponse(BaseModel):
    """Schema for a successful login."""

    message: str
    user: LoginUser


class MessageResponse(BaseModel):
    """Schema for a plain acknowledgment."""

    message: str
