"""
Typed exceptions for service layer operations.

Each exception carries the HTTP status and machine-readable code it maps to,
so the API layer translates them with a single exception handler.
"""


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = 500
    code: str = "internal"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UserAlreadyExistsError(ServiceError):
    """Raised when signing up with an email that already has an account."""

    status_code = 400
    code = "conflict"
    message = "User already exists"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__()


class UserNotFoundError(ServiceError):
    """Raised when no user exists for the given email."""

    status_code = 400
    code = "not_found"
    message = "User not found"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__()


class InvalidPasswordError(ServiceError):
    """Raised when the supplied password does not match the stored hash."""

    status_code = 400
    code = "invalid_credentials"
    message = "Invalid password"


class PasswordHashingError(ServiceError):
    """Raised when the password hasher fails. Details are logged, never returned."""
