"""SQLAlchemy models."""
from models.base import Base, TimestampMixin
from models.user import User

__all__ = ["Base", "TimestampMixin", "User"]
