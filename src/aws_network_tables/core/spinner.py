"""Spinner for long running queries"""

import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar, Optional
from rich.console import Console
from rich.spinner import Spinner
from rich.live import Live

T = TypeVar("T")


def _should_use_spinner() -> bool:
    """Only animate on an interactive terminal outside of tests and CI."""
    if (
        "pytest" in sys.modules
        or os.environ.get("PYTEST_CURRENT_TEST")
        or os.environ.get("NO_SPINNER")
    ):
        return False
    if os.environ.get("CI", "").lower() in ("true", "1", "yes"):
        return False
    return sys.stdout.isatty()


def run_with_spinner(
    func: Callable[[], T],
    message: str = "Querying...",
    timeout_seconds: Optional[int] = None,
    console: Optional[Console] = None,
    on_timeout: Optional[Callable[[], None]] = None,
) -> T:
    """Run func while showing a spinner.

    When timeout_seconds elapses, on_timeout is called (typically a query
    context's cancel) and TimeoutError is raised once func has returned.
    """
    if not _should_use_spinner() and timeout_seconds is None:
        return func()

    console = console or Console()
    use_spinner = _should_use_spinner()
    timed_out = False

    with ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(func)
        start_time = time.time()
        live = (
            Live(
                Spinner("dots", text=message, style="cyan"),
                console=console,
                refresh_per_second=10,
                transient=True,
            )
            if use_spinner
            else None
        )
        if live:
            live.start()
        try:
            while not future.done():
                elapsed = time.time() - start_time
                if timeout_seconds is not None and elapsed > timeout_seconds:
                    if not timed_out and on_timeout:
                        on_timeout()
                    timed_out = True
                if live:
                    live.update(
                        Spinner(
                            "dots", text=f"{message} ({elapsed:.1f}s)", style="cyan"
                        )
                    )
                time.sleep(0.2)
        finally:
            if live:
                live.stop()
        result = future.result()

    if timed_out:
        raise TimeoutError(f"Query timed out after {timeout_seconds}s")
    return result
