"""Password hashing with bcrypt."""
import bcrypt

# bcrypt only considers the first 72 bytes of its input and newer releases
# reject anything longer, so request schemas enforce this limit up front.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int) -> str:
    """Return a salted bcrypt hash of the password."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    Returns False for a malformed stored hash instead of raising, so a corrupt
    record reads as a failed login rather than a server error.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
