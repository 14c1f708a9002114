"""Pydantic schemas for error responses."""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every error response."""

    message: str
    code: str
