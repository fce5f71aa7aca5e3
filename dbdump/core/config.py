"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="sqlite-json-dump", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    # External tool
    sqlite_binary: str = Field(default="sqlite3", alias="SQLITE_BINARY")
    command_timeout: Optional[float] = Field(default=None, gt=0, alias="COMMAND_TIMEOUT")

    # Output
    json_indent: int = Field(default=4, ge=0, alias="JSON_INDENT")
    output_encoding: str = Field(default="utf-8", alias="OUTPUT_ENCODING")
    ensure_ascii: bool = Field(default=False, alias="ENSURE_ASCII")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
