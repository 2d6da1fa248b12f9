# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import typer

from timefind.core.exceptions import TimefindError
from timefind.query.constraint import Constraint, from_string

app = typer.Typer(
    name="timefind",
    help="Find the next occurrences of cron-style calendar constraints",
    no_args_is_help=True,
)

_EXIT_INVALID = 2


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log search details to stderr")
    ] = False,
) -> None:
    """Configure logging from settings before running a command."""
    from timefind.core.config import get_settings
    from timefind.core.logging import setup_logging

    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_format)


def _parse(expression: str) -> Constraint:
    try:
        return from_string(expression)
    except TimefindError as exc:
        typer.echo(f"Invalid expression: {exc}", err=True)
        raise typer.Exit(_EXIT_INVALID) from exc


@app.command(name="next")
def next_command(
    expression: Annotated[
        str, typer.Argument(help="Five-field expression: minute hour day month weekday")
    ],
    count: Annotated[
        int | None,
        typer.Option("--count", "-n", min=1, help="Number of occurrences to list"),
    ] = None,
    after: Annotated[
        datetime | None,
        typer.Option("--after", help="Start searching after this timestamp"),
    ] = None,
) -> None:
    """List the next occurrences of EXPRESSION."""
    from rich.console import Console
    from rich.table import Table

    from timefind.core.config import get_settings
    from timefind.query.search import next_list

    constraint = _parse(expression)
    n = count or get_settings().default_count
    start = after or datetime.now()

    try:
        occurrences = next_list(constraint, start, n)
    except TimefindError as exc:
        typer.echo(f"Invalid expression: {exc}", err=True)
        raise typer.Exit(_EXIT_INVALID) from exc

    table = Table(title=f"Next occurrences of {constraint}")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Occurrence", style="bold", no_wrap=True)
    table.add_column("Weekday")
    for i, occurrence in enumerate(occurrences, start=1):
        table.add_row(str(i), occurrence.isoformat(sep=" "), occurrence.strftime("%A"))

    Console().print(table)


@app.command()
def match(
    expression: Annotated[str, typer.Argument(help="Five-field expression")],
    timestamp: Annotated[datetime, typer.Argument(help="Timestamp to test")],
) -> None:
    """Exit 0 if TIMESTAMP satisfies EXPRESSION, 1 otherwise."""
    constraint = _parse(expression)
    if constraint.match(timestamp):
        typer.echo(f"{timestamp.isoformat(sep=' ')} matches {constraint}")
        return
    typer.echo(f"{timestamp.isoformat(sep=' ')} does not match {constraint}")
    raise typer.Exit(1)


@app.command()
def normalize(
    expression: Annotated[str, typer.Argument(help="Five-field expression")],
) -> None:
    """Print the canonical form of EXPRESSION."""
    typer.echo(str(_parse(expression)))


@app.command()
def wait(
    expression: Annotated[str, typer.Argument(help="Five-field expression")],
) -> None:
    """Block until the next occurrence of EXPRESSION, then print it."""
    from timefind.sdk import next_now, wait_next_sync

    constraint = _parse(expression)
    try:
        typer.echo(f"Waiting for {next_now(constraint).isoformat(sep=' ')}", err=True)
        fired = wait_next_sync(constraint)
    except TimefindError as exc:
        typer.echo(f"Invalid expression: {exc}", err=True)
        raise typer.Exit(_EXIT_INVALID) from exc
    typer.echo(fired.isoformat(sep=" "))


@app.command()
def version() -> None:
    """Show version information."""
    from timefind import __version__

    typer.echo(f"timefind v{__version__}")
