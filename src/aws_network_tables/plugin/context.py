"""Per-query state handed to every hydrate function"""

import threading
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import boto3

from ..core import BaseClient, get_logger

logger = get_logger("context")


@dataclass(frozen=True)
class CommonColumns:
    """Account level values shared by every row of a query."""

    partition: str
    account_id: str


class Sink(Protocol):
    def push(self, item: Any, region: str) -> None: ...


class ListSink:
    """Collects streamed items in arrival order."""

    def __init__(self):
        self.items: list[Any] = []
        self._lock = threading.Lock()

    def push(self, item: Any, region: str) -> None:
        with self._lock:
            self.items.append(item)


class QueryContext(BaseClient):
    """Session, qualifiers, result sink and cancellation for one query.

    common_columns() is resolved at most once per context and is safe to
    call from any worker thread.
    """

    def __init__(
        self,
        profile: Optional[str] = None,
        session: Optional[boto3.Session] = None,
        quals: Optional[dict[str, Any]] = None,
        regions: Optional[list[str]] = None,
        limit: Optional[int] = None,
        max_workers: int = 10,
        max_attempts: int = 5,
    ):
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        super().__init__(profile, session, max_attempts)
        self.quals = dict(quals or {})
        self.regions = list(regions or [])
        self.limit = limit
        self.max_workers = max_workers
        self.sink: Sink = ListSink()
        self._cancelled = threading.Event()
        self._common: Optional[CommonColumns] = None
        self._common_lock = threading.Lock()

    def key_qual(self, name: str) -> Optional[Any]:
        return self.quals.get(name)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        if not self._cancelled.is_set():
            logger.debug("Query cancelled")
        self._cancelled.set()

    def stream_list_item(self, item: Any, region: str) -> None:
        if self.cancelled:
            return
        self.sink.push(item, region)

    def common_columns(self) -> CommonColumns:
        if self._common is None:
            with self._common_lock:
                if self._common is None:
                    self._common = self._fetch_common_columns()
        return self._common

    def _fetch_common_columns(self) -> CommonColumns:
        identity = self.client("sts").get_caller_identity()
        # arn:<partition>:sts::<account>:...
        partition = identity["Arn"].split(":")[1]
        logger.debug(
            "Resolved account %s in partition %s", identity["Account"], partition
        )
        return CommonColumns(partition=partition, account_id=identity["Account"])
