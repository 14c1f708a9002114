"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Fields of the user summary that may be dropped from GET /api/users.
# `id` is always returned and `password` is never returned.
EXCLUDABLE_USER_FIELDS = frozenset({"email", "bookmarks"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: str

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=9000, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # Password hashing work factor
    bcrypt_rounds: int = Field(default=10, ge=4, le=31, validation_alias="BCRYPT_ROUNDS")

    # Comma-separated fields omitted from the user list response
    user_list_exclude_fields_str: str = Field(
        default="bookmarks",
        validation_alias="USER_LIST_EXCLUDE_FIELDS",
    )

    @model_validator(mode="after")
    def validate_user_list_exclude_fields(self) -> "Settings":
        """Reject exclusion entries that are not optional user summary fields."""
        unknown = set(self.user_list_exclude_fields) - EXCLUDABLE_USER_FIELDS
        if unknown:
            raise ValueError(
                f"USER_LIST_EXCLUDE_FIELDS contains unknown fields: {sorted(unknown)}. "
                f"Allowed: {sorted(EXCLUDABLE_USER_FIELDS)}.",
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        return _split_csv(self.cors_origins_str)

    @property
    def user_list_exclude_fields(self) -> list[str]:
        """Parse comma-separated user list exclusions into a list."""
        return _split_csv(self.user_list_exclude_fields_str)


def _split_csv(value: str) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
