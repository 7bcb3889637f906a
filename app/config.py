"""Application configuration settings."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


@dataclass(frozen=True)
class StorageConfig:
    """Explicit storage settings handed to the persistence layer."""

    table_name: str
    database_url: str
    region: str | None = None


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./channel_directory.db",
        description="Database connection URL used by SQLAlchemy to reach the key-value table",
        min_length=1,
    )
    notification_channel_table_name: str = Field(
        default="notification_channel",
        description="Name of the table holding notification channel items",
        min_length=1,
    )
    aws_region: str | None = Field(
        default=None,
        description="Region the channel table is deployed in",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level applied at process start",
    )

    def storage_config(self) -> StorageConfig:
        """Return the storage settings as an explicit configuration struct."""

        return StorageConfig(
            table_name=self.notification_channel_table_name,
            database_url=self.database_url,
            region=self.aws_region,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "StorageConfig", "get_settings", "reset_settings_cache"]
