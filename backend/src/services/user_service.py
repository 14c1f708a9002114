"""Service layer for user accounts and their bookmarks."""
import logging
from collections.abc import Sequence

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.security import hash_password, verify_password
from models.user import User
from services.exceptions import (
    InvalidPasswordError,
    PasswordHashingError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


async def list_users(db: AsyncSession) -> Sequence[User]:
    """Return all users, oldest first."""
    result = await db.execute(select(User).order_by(User.created_at, User.id))
    return result.scalars().all()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Return the user with the given email, or None."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


def _is_email_conflict(e: IntegrityError) -> bool:
    # PostgreSQL names the index, SQLite names the column
    message = str(e.orig)
    return "ix_users_email" in message or "users.email" in message


async def create_user(
    db: AsyncSession,
    email: str,
    password: str,
    bcrypt_rounds: int,
) -> User:
    """
    Create a user with a hashed password and no bookmarks.

    The lookup before inserting only avoids hashing for an obvious duplicate.
    Uniqueness is guaranteed by the unique index on email: a concurrent signup
    that slips past the lookup fails the insert and is reported the same way.

    Raises:
        UserAlreadyExistsError: If an account with this email exists.
        PasswordHashingError: If the password could not be hashed.
    """
    if await get_user_by_email(db, email) is not None:
        logger.warning("Signup rejected, email already registered")
        raise UserAlreadyExistsError(email)

    try:
        password_hash = await run_in_threadpool(hash_password, password, bcrypt_rounds)
    except ValueError as e:
        logger.exception("Password hashing failed")
        raise PasswordHashingError() from e

    user = User(email=email, password=password_hash, bookmarks=[])
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        if _is_email_conflict(e):
            logger.warning("Signup rejected by unique email index")
            raise UserAlreadyExistsError(email) from e
        raise
    await db.refresh(user)
    logger.info("Created user %s", user.id)
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    """
    Return the user if the email exists and the password matches its hash.

    Raises:
        UserNotFoundError: If no user has this email.
        InvalidPasswordError: If the password does not match.
    """
    user = await get_user_by_email(db, email)
    if user is None:
        raise UserNotFoundError(email)

    if not await run_in_threadpool(verify_password, password, user.password):
        logger.warning("Login rejected for user %s: invalid password", user.id)
        raise InvalidPasswordError()
    return user


async def update_bookmarks(db: AsyncSession, email: str, bookmarks: list[str]) -> None:
    """
    Replace the user's bookmarks with the given list.

    Raises:
        UserNotFoundError: If no user has this email.
    """
    result = await db.execute(
        update(User)
        .where(User.email == email)
        .values(bookmarks=list(bookmarks)),
    )
    if result.rowcount == 0:
        raise UserNotFoundError(email)
