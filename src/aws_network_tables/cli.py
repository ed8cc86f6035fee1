"""AWS Network Tables CLI"""

import json
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from botocore.exceptions import BotoCoreError, ClientError
from rich.console import Console

from .config import load_config
from .core import AWSTablesError, BaseDisplay, run_with_spinner, setup_logging
from .plugin import QueryContext, execute
from .tables import all_tables, get_table

app = typer.Typer(
    name="aws-tables",
    help="Query AWS networking resources as tables",
    no_args_is_help=True,
)
console = Console()


def _render(data, fmt: str) -> bool:
    if fmt == "table":
        return False  # caller should render with display
    if fmt == "json":
        console.print_json(json.dumps(data, default=str))
        return True
    if fmt == "yaml":
        plain = json.loads(json.dumps(data, default=str))
        console.print(yaml.safe_dump(plain, sort_keys=False))
        return True
    console.print(f"[yellow]Unknown format: {fmt}. Defaulting to table.[/]")
    return False


def parse_where(clauses: list[str]) -> dict[str, str]:
    """Parse repeated 'column=value' options into qualifiers."""
    quals = {}
    for clause in clauses:
        name, sep, value = clause.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected column=value, got '{clause}'")
        quals[name.strip()] = value.strip()
    return quals


@app.command("tables")
def list_tables():
    """List available tables"""
    BaseDisplay(console).show_tables(all_tables())


@app.command("columns")
def show_columns(table: str = typer.Argument(..., help="Table name")):
    """Show the columns of a table"""
    try:
        t = get_table(table)
    except AWSTablesError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)
    BaseDisplay(console).show_columns(t)


@app.command("query")
def query(
    table: str = typer.Argument(..., help="Table name"),
    where: List[str] = typer.Option(
        [], "--where", "-w", help="Equality filter column=value (repeatable)"
    ),
    regions: Optional[str] = typer.Option(
        None, "--regions", help="CSV list of regions"
    ),
    columns: Optional[str] = typer.Option(
        None, "--columns", "-c", help="CSV list of columns to show"
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=1, help="Stop after N rows"
    ),
    output_format: str = typer.Option("table", "--format", help="table|json|yaml"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="Path to config.yaml"
    ),
    timeout: Optional[int] = typer.Option(
        None, "--timeout", help="Cancel the query after N seconds"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs here"),
):
    """Run a query against a table"""
    setup_logging(debug=debug, log_file=log_file)
    try:
        t = get_table(table)
        config = load_config(config_file).merged(
            profile=profile,
            regions=[r.strip() for r in regions.split(",")] if regions else None,
        )
        selected = [c.strip() for c in columns.split(",")] if columns else None
        for name in selected or []:
            if t.column(name) is None:
                raise typer.BadParameter(f"Unknown column '{name}'")

        ctx = QueryContext(
            profile=config.profile,
            quals=parse_where(where),
            regions=config.regions,
            limit=limit,
            max_workers=config.max_workers,
            max_attempts=config.max_attempts,
        )
        rows = run_with_spinner(
            lambda: execute(t, ctx),
            f"Querying {t.name}",
            timeout_seconds=timeout,
            console=console,
            on_timeout=ctx.cancel,
        )
    except (AWSTablesError, ValueError) as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)
    except (ClientError, BotoCoreError) as e:
        console.print(f"[red]AWS error:[/] {e}")
        raise typer.Exit(1)
    except TimeoutError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(2)

    if selected:
        rows = [{k: row[k] for k in selected} for row in rows]
    if _render(rows, output_format):
        return
    BaseDisplay(console).show_rows(t, rows, selected)


def main():
    app()


if __name__ == "__main__":
    main()
