"""Minimal host runtime for table plugins"""

from .context import CommonColumns, ListSink, QueryContext
from .engine import execute
from .table import (
    Column,
    ColumnType,
    FromField,
    FromHydrate,
    FromTransform,
    GetConfig,
    ListConfig,
    Row,
    Table,
)

__all__ = [
    "CommonColumns",
    "ListSink",
    "QueryContext",
    "execute",
    "Column",
    "ColumnType",
    "FromField",
    "FromHydrate",
    "FromTransform",
    "GetConfig",
    "ListConfig",
    "Row",
    "Table",
]
