"""
Configuration and logging for the SDK.
"""

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "api.context.io"
DEFAULT_API_VERSION = "1.1"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ContextIOSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="CONTEXTIO_")

    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    endpoint: str = DEFAULT_ENDPOINT
    ssl: bool = True
    auth_headers: bool = False
    save_headers: bool = False
    timeout: int = 30

    debug: bool = False
    log_level: str = "INFO"


def get_settings() -> ContextIOSettings:
    return ContextIOSettings()


def setup_logging(level: str = "INFO") -> None:
    """Configure the ``contextio`` logger with a stream handler."""
    logger = logging.getLogger("contextio")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"contextio.{name}")
