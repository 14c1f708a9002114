"""Tests for application configuration."""
import pytest
from pydantic import ValidationError

from core.config import Settings


class TestCorsOriginsParsing:
    """Tests for CORS origins parsing from environment variables."""

    def test_default_cors_origins_allows_all(self) -> None:
        """Default CORS origins accept any origin."""
        settings = Settings(_env_file=None, database_url="postgresql+asyncpg://test")
        assert settings.cors_origins == ["*"]

    def test_parse_origins_with_whitespace(self) -> None:
        """Whitespace around origins is stripped and empty entries dropped."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql+asyncpg://test",
            CORS_ORIGINS="  http://localhost:5173 , https://example.com,",
        )
        assert settings.cors_origins == [
            "http://localhost:5173",
            "https://example.com",
        ]


class TestUserListExcludeFields:
    """Tests for the user list exclusion setting."""

    def test_default_excludes_bookmarks(self) -> None:
        """Bookmarks are left out of the user list by default."""
        settings = Settings(_env_file=None, database_url="postgresql+asyncpg://test")
        assert settings.user_list_exclude_fields == ["bookmarks"]

    def test_read_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """USER_LIST_EXCLUDE_FIELDS is parsed as a comma-separated list."""
        monkeypatch.setenv("USER_LIST_EXCLUDE_FIELDS", "email, bookmarks")
        settings = Settings(_env_file=None, database_url="postgresql+asyncpg://test")
        assert settings.user_list_exclude_fields == ["email", "bookmarks"]

    def test_empty_excludes_nothing(self) -> None:
        """An empty value keeps every optional field."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql+asyncpg://test",
            USER_LIST_EXCLUDE_FIELDS="",
        )
        assert settings.user_list_exclude_fields == []

    @pytest.mark.parametrize("value", ["password", "id", "bookmarks,nickname"])
    def test_unknown_fields_rejected(self, value: str) -> None:
        """Only email and bookmarks may be excluded."""
        with pytest.raises(ValidationError, match="unknown fields"):
            Settings(
                _env_file=None,
                database_url="postgresql+asyncpg://test",
                USER_LIST_EXCLUDE_FIELDS=value,
            )


class TestServerAndHashingSettings:
    """Tests for server and password hashing settings."""

    def test_defaults(self) -> None:
        """Server listens on port 9000 and bcrypt uses 10 rounds by default."""
        settings = Settings(_env_file=None, database_url="postgresql+asyncpg://test")
        assert settings.port == 9000
        assert settings.host == "0.0.0.0"
        assert settings.bcrypt_rounds == 10

    def test_database_url_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The connection string has no default."""
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_bounds(self, rounds: int) -> None:
        """The bcrypt work factor must be within bcrypt's supported range."""
        with pytest.raises(ValidationError):
            Settings(
                _env_file=None,
                database_url="postgresql+asyncpg://test",
                BCRYPT_ROUNDS=rounds,
            )
