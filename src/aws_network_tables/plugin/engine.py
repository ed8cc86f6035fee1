"""Runs a table's List or Get across its region matrix"""

import concurrent.futures
import threading
from datetime import datetime
from typing import Any, Optional

from ..core import ColumnNotFoundError, get_logger
from .context import QueryContext
from .table import ColumnType, Row, Table

logger = get_logger("engine")

REGION_COLUMN = "region"


class RowSink:
    """Turns streamed items into rows, filters them and enforces the limit.

    Rows are kept per region so the result can be assembled in matrix order
    regardless of which worker finished first.
    """

    def __init__(self, table: Table, ctx: QueryContext, filters: dict[str, Any]):
        self.table = table
        self.ctx = ctx
        self.filters = filters
        self.rows: dict[str, list[dict]] = {}
        self.count = 0
        self._lock = threading.Lock()

    def push(self, item: Any, region: str) -> None:
        row = self.table.build_row(Row(item=item, region=region, ctx=self.ctx))
        if not _matches(row, self.filters):
            return
        with self._lock:
            if self.ctx.limit is not None and self.count >= self.ctx.limit:
                return
            self.rows.setdefault(region, []).append(row)
            self.count += 1
            if self.ctx.limit is not None and self.count >= self.ctx.limit:
                self.ctx.cancel()


def _matches(row: dict, filters: dict[str, Any]) -> bool:
    for name, expected in filters.items():
        value = row.get(name)
        if value is None:
            return False
        if isinstance(expected, datetime):
            if value != expected:
                return False
        elif str(value) != str(expected):
            return False
    return True


def _parse_timestamp(name: str, value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    # fromisoformat only accepts a trailing Z from 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(
            f"Cannot filter '{name}' on '{value}': expected an ISO 8601 timestamp"
        ) from None


def _resolve_matrix(table: Table, ctx: QueryContext) -> list[str]:
    regions = table.get_matrix(ctx) if table.get_matrix else [ctx.default_region]
    wanted: Optional[str] = ctx.key_qual(REGION_COLUMN)
    if wanted is not None:
        regions = [r for r in regions if r == wanted]
    return regions


def _validate_quals(table: Table, ctx: QueryContext) -> dict[str, Any]:
    """Return the qualifiers that still need to be applied to built rows."""
    filters = {}
    for name, value in ctx.quals.items():
        column = table.column(name)
        if column is None:
            raise ColumnNotFoundError(table.name, name)
        if column.type == ColumnType.JSON:
            raise ValueError(f"Cannot filter on JSON column '{name}'")
        if column.type == ColumnType.TIMESTAMP:
            value = _parse_timestamp(name, value)
        if name != REGION_COLUMN:
            filters[name] = value
    return filters


def _get_region(table: Table, ctx: QueryContext, region: str) -> None:
    get_config = table.get_config
    if ctx.cancelled:
        return
    try:
        item = get_config.hydrate(ctx, region)
    except Exception as e:
        if get_config.ignore_error and get_config.ignore_error(e):
            logger.debug("%s: ignoring get error in %s: %s", table.name, region, e)
            return
        raise
    if item is not None:
        ctx.stream_list_item(item, region)


def _list_region(table: Table, ctx: QueryContext, region: str) -> None:
    if ctx.cancelled:
        return
    table.list_config.hydrate(ctx, region)


def _run_region(fetch, table: Table, ctx: QueryContext, region: str) -> None:
    # Cancel from the worker so regions queued behind it never start
    try:
        fetch(table, ctx, region)
    except Exception:
        ctx.cancel()
        raise


def execute(table: Table, ctx: QueryContext) -> list[dict]:
    """Run a query and return rows in region-matrix order, then provider order.

    The first provider error cancels the remaining regions and is re-raised.
    """
    filters = _validate_quals(table, ctx)
    regions = _resolve_matrix(table, ctx)
    if not regions:
        return []

    get_config = table.get_config
    use_get = (
        get_config is not None and ctx.key_qual(get_config.key_column) is not None
    )
    fetch = _get_region if use_get else _list_region
    logger.debug(
        "%s: %s across %d region(s)",
        table.name,
        "get" if use_get else "list",
        len(regions),
    )

    sink = RowSink(table, ctx, filters)
    ctx.sink = sink
    with concurrent.futures.ThreadPoolExecutor(
        max_workers=min(ctx.max_workers, len(regions))
    ) as executor:
        futures = {
            executor.submit(_run_region, fetch, table, ctx, r): r for r in regions
        }
        try:
            for future in concurrent.futures.as_completed(futures):
                future.result()
        except Exception as e:
            logger.warning("%s failed in %s: %s", table.name, futures[future], e)
            ctx.cancel()
            for pending in futures:
                pending.cancel()
            raise

    rows = []
    for region in regions:
        rows.extend(sink.rows.get(region, []))
    return rows
