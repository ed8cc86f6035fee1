"""Exceptions raised by the table runtime.

Provider failures are not wrapped: botocore's ClientError reaches the caller
unchanged so it can decide on retry or backoff.
"""

from typing import Optional


class AWSTablesError(Exception):
    """Base class for all package errors."""


class ConfigError(AWSTablesError):
    """Configuration file is missing, unreadable or invalid."""


class TableNotFoundError(AWSTablesError):
    def __init__(self, name: str, suggestion: Optional[str] = None):
        self.name = name
        self.suggestion = suggestion
        msg = f"Table '{name}' not found"
        if suggestion:
            msg += f" (did you mean '{suggestion}'?)"
        super().__init__(msg)


class ColumnNotFoundError(AWSTablesError):
    def __init__(self, table: str, column: str):
        self.table = table
        self.column = column
        super().__init__(f"Table '{table}' has no column '{column}'")
