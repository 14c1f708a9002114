"""User model for storing account credentials and bookmarks."""
import uuid

from sqlalchemy import JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    User account with its bookmarked content items.

    Email uniqueness is enforced by the unique index on `email`, not by the
    application. `bookmarks` is an ordered list of opaque item identifiers and
    is always replaced as a whole.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(
        String(320),
        unique=True,
        index=True,
        nullable=False,
    )
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash - plaintext is never stored",
    )
    bookmarks: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
