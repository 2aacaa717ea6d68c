"""Environment configuration management."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, field_validator

from camelintent.dependencies import DEFAULT_GROUP_ID, DEFAULT_LIBRARY_PREFIX
from camelintent.errors import CamelIntentError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
TRUTHY = ["true", "1", "yes"]


class ConfigError(CamelIntentError):
    """Raised when the environment holds an invalid setting."""

    pass


class CamelIntentConfig(BaseModel):
    """Settings read from CAMELINTENT_* environment variables."""

    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    debug: bool = Field(False, description="Enable file logging")
    log_file: str = Field("camelintent.log", description="Log file used in debug mode")
    catalog_path: Path | None = Field(None, description="Catalog file or directory")
    group_id: str = Field(DEFAULT_GROUP_ID, description="Maven group of Camel artifacts")
    library_prefix: str = Field(DEFAULT_LIBRARY_PREFIX, description="Prefix of library display names")

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return level

    @field_validator("debug", mode="before")
    @classmethod
    def _parse_debug(cls, value) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).lower() in TRUTHY


def load_config(env_file: str | Path | None = None) -> CamelIntentConfig:
    """
    Build the configuration from the environment.

    Args:
        env_file: Optional .env file to load first; defaults to the one in the
            working directory, if any

    Returns:
        CamelIntentConfig

    Raises:
        ConfigError: If a variable holds an invalid value
    """
    load_dotenv(env_file or Path.cwd() / ".env")

    values = {
        "log_level": os.getenv("CAMELINTENT_LOG_LEVEL"),
        "debug": os.getenv("CAMELINTENT_DEBUG"),
        "log_file": os.getenv("CAMELINTENT_LOG_FILE"),
        "catalog_path": os.getenv("CAMELINTENT_CATALOG"),
        "group_id": os.getenv("CAMELINTENT_GROUP_ID"),
        "library_prefix": os.getenv("CAMELINTENT_LIBRARY_PREFIX"),
    }
    # unset and empty variables keep their defaults
    values = {key: value for key, value in values.items() if value}

    try:
        return CamelIntentConfig(**values)
    except ValueError as error:
        raise ConfigError(f"Invalid configuration: {error}")


def configure_logging(config: CamelIntentConfig, sink=None) -> int:
    """
    Route loguru output through a single handler at the configured level.

    Debug mode forces DEBUG. Without an explicit sink, records go to whatever
    `sys.stderr` is when they are emitted.

    Returns:
        The loguru handler id
    """
    logger.remove()
    log_level = "DEBUG" if config.debug else config.log_level
    if sink is None:
        sink = lambda message: sys.stderr.write(message)
    return logger.add(
        sink,
        level=log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )
