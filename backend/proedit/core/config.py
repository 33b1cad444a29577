"""
Application Configuration

Settings class using pydantic-settings for environment variable loading.
Selects the storage backend and the repository integrity policies.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    For example, STORAGE_BACKEND=sql switches to the SQLAlchemy store.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ProEdit API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    version: str = Field(default="0.1.0", description="API version")
    log_level: str = Field(default="INFO", description="Root log level")

    # Storage
    storage_backend: Literal["memory", "sql"] = Field(
        default="memory",
        description="Entity store backend: in-process memory or SQL database",
    )
    database_url: str = Field(
        default="sqlite:///./proedit.db",
        description="Database connection URL (sql backend only)",
    )
    sql_echo: bool = Field(default=False, description="Echo SQL statements")

    # Integrity policies
    enforce_references: bool = Field(
        default=False,
        description="Reject creates/updates whose parent or asset id does not exist",
    )
    asset_delete_policy: Literal["keep", "detach"] = Field(
        default="keep",
        description="What happens to clips when their asset is deleted",
    )
    strict_export_transitions: bool = Field(
        default=False,
        description="Reject export status changes that leave a terminal state",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma-separated list of allowed CORS origins",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string to list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Uses lru_cache to ensure settings are only loaded once per process.

    Example:
        >>> settings = get_settings()
        >>> print(settings.storage_backend)
        memory
    """
    return Settings()
