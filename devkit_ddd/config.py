"""Library configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Library settings, read from ``DDD_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="DDD_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Logging; defaults to DEBUG in development and INFO elsewhere
    LOG_LEVEL: LogLevel | None = None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @property
    def log_level(self) -> int:
        """Effective stdlib log level."""
        if self.LOG_LEVEL is not None:
            return logging.getLevelNamesMapping()[self.LOG_LEVEL]
        return logging.DEBUG if self.ENVIRONMENT == "development" else logging.INFO


def configure_logging(environment: str | None = None, settings: Settings | None = None) -> None:
    """
    Configure structured logging with structlog.

    The library itself never calls this; applications (and the test suite)
    opt in.
    """
    settings = settings or get_settings()
    environment = environment or settings.ENVIRONMENT

    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
