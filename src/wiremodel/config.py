"""wiremodel settings loaded from environment variables."""

import logging
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wiremodel.codes import ProcessingMode

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Package-wide settings read from ``WIREMODEL_*`` environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="WIREMODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    DEFAULT_RESPONSE_PROCESSING: ProcessingMode = Field(
        default=ProcessingMode.MODEL,
        description="Processing mode of commands that do not set one explicitly.",
    )

    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Level of the wiremodel logger.",
    )


def get_settings() -> Settings:
    """Factory function so callers can inject their own settings."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Safe to call repeatedly; the handler is only added once.
    """
    settings = settings or get_settings()
    logger = logging.getLogger("wiremodel")
    logger.setLevel(settings.LOG_LEVEL.value)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)

    return logger
