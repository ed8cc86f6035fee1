"""Rich rendering of tables, columns and rows"""

import json
from typing import Optional, TYPE_CHECKING
from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text

if TYPE_CHECKING:
    from ..plugin.table import Table

STATE_STYLES = {
    "available": "green",
    "pending": "yellow",
    "pendingAcceptance": "yellow",
    "modifying": "yellow",
    "deleting": "red",
    "deleted": "red",
    "failed": "red",
    "rejected": "red",
}


def _cell(value) -> Text:
    if value is None:
        return Text("")
    if isinstance(value, (dict, list)):
        return Text(json.dumps(value, default=str, separators=(",", ":")))
    return Text(str(value))


class BaseDisplay:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_tables(self, tables: list["Table"]):
        table = RichTable(title="Tables", show_header=True, header_style="bold")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Name", style="cyan")
        table.add_column("Description", style="white")
        for i, t in enumerate(tables, 1):
            table.add_row(str(i), t.name, t.description)
        self.console.print(table)

    def show_columns(self, t: "Table"):
        table = RichTable(title=t.name, show_header=True, header_style="bold")
        table.add_column("Column", style="cyan", no_wrap=True)
        table.add_column("Type", style="yellow")
        table.add_column("Description", style="white")
        for col in t.columns:
            table.add_row(col.name, col.type.value, col.description)
        self.console.print(table)

    def show_rows(
        self, t: "Table", rows: list[dict], columns: Optional[list[str]] = None
    ):
        if not rows:
            self.console.print(f"[yellow]No rows returned from {t.name}[/]")
            return
        columns = columns or t.column_names
        table = RichTable(title=t.name, show_header=True, header_style="bold")
        for name in columns:
            table.add_column(name, overflow="fold")
        for row in rows:
            cells = []
            for name in columns:
                value = row.get(name)
                if name == "state" and value:
                    cells.append(Text(value, style=STATE_STYLES.get(value, "white")))
                else:
                    cells.append(_cell(value))
            table.add_row(*cells)
        self.console.print(table)
        self.console.print(f"\n[dim]Total: {len(rows)} row(s)[/]")
