"""Core utilities for AWS Network Tables"""

from .base import BaseClient, DEFAULT_REGION
from .display import BaseDisplay
from .exceptions import (
    AWSTablesError,
    ColumnNotFoundError,
    ConfigError,
    TableNotFoundError,
)
from .logging import setup_logging, get_logger, logger
from .spinner import run_with_spinner

__all__ = [
    "BaseClient",
    "DEFAULT_REGION",
    "BaseDisplay",
    "AWSTablesError",
    "ColumnNotFoundError",
    "ConfigError",
    "TableNotFoundError",
    "setup_logging",
    "get_logger",
    "logger",
    "run_with_spinner",
]
