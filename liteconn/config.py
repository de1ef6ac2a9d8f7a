"""Configuration management for liteconn."""

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import DEFAULT_BUSY_TIMEOUT_MS
from .types import Environment


def parse_bool(value: Any, default: bool = False) -> bool:
    """Parse a boolean flag; only ``True`` or ``"true"`` (any case) count as true."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


class Settings(BaseModel):
    """Driver settings."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    busy_timeout_ms: int = Field(
        default=DEFAULT_BUSY_TIMEOUT_MS,
        ge=0,
        description="Milliseconds a blocked write waits for a lock",
    )
    default_shared_cache: bool = Field(
        default=False,
        description="Shared-cache mode when a URL does not set shared_cache",
    )
    default_julian_day: bool = Field(
        default=False,
        description="Julian day date encoding when a URL does not set julian_day",
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if self.environment == Environment.TESTING:
            self.log_level = "DEBUG"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    return Settings(
        environment=Environment(os.getenv("LITECONN_ENV", "development")),
        log_level=os.getenv("LITECONN_LOG_LEVEL", "INFO").upper(),
        busy_timeout_ms=int(
            os.getenv("LITECONN_BUSY_TIMEOUT_MS", str(DEFAULT_BUSY_TIMEOUT_MS))
        ),
        default_shared_cache=parse_bool(os.getenv("LITECONN_SHARED_CACHE")),
        default_julian_day=parse_bool(os.getenv("LITECONN_JULIAN_DAY")),
    )


# Global settings instance
settings = load_settings()
