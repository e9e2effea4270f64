"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Annotated, Optional

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .timezones import DEFAULT_TIMEZONE


DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """Central configuration for the API service."""

    model_config = SettingsConfigDict(
        env_file=[".env.dev", ".env"],
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # App metadata
    api_title: str = "arun API"
    api_version: str = "0.1.0"

    # Server
    host: str = "0.0.0.0"
    port: Optional[int] = Field(default=None, alias="API_ARUN_GG_PORT", ge=1, le=65535)
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Weekday lookup
    default_timezone: str = DEFAULT_TIMEZONE

    # Misc endpoints
    random_number_max: int = Field(default=100, ge=1)

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("port", mode="before")
    @classmethod
    def _lenient_port(cls, value):
        # Anything unusable leaves the port unset so the CLI falls back to DEFAULT_PORT.
        if value is None:
            return None
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
        try:
            port = int(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring unparsable API_ARUN_GG_PORT value {!r}", value)
            return None
        if not 1 <= port <= 65535:
            logger.warning("Ignoring out-of-range API_ARUN_GG_PORT value {}", port)
            return None
        return port

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""

    return Settings()
