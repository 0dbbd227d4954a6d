# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import StrEnum
from typing import Annotated

import typer

from cronfield.core.config import get_settings
from cronfield.core.constants import FieldKind
from cronfield.core.exceptions import InvalidExpressionError
from cronfield.core.logging import setup_logging
from cronfield.fields.field import CronField

app = typer.Typer(
    name="cronfield",
    help="Parse, inspect and match single crontab fields",
    no_args_is_help=True,
)

EXIT_NO_MATCH = 1
EXIT_INVALID = 2


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


@app.callback()
def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)


def _parse_or_exit(kind: FieldKind, expression: str) -> CronField:
    try:
        return CronField.parse(kind, expression)
    except InvalidExpressionError as exc:
        typer.echo(f"Invalid expression: {exc}", err=True)
        raise typer.Exit(EXIT_INVALID) from exc


@app.command()
def show(
    kind: Annotated[FieldKind, typer.Argument(help="Field kind")],
    expression: Annotated[str, typer.Argument(help="Field expression, e.g. '1-5/2'")],
    names: Annotated[
        bool, typer.Option("--names", help="Render month/weekday names")
    ] = False,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
) -> None:
    """Show the canonical form and selected values of a field."""
    field = _parse_or_exit(kind, expression)
    use_names = names or get_settings().use_names

    if fmt == OutputFormat.JSON:
        from cronfield.cli.formatters.json_fmt import format_json

        sys.stdout.write(format_json(field, expression, use_names=use_names) + "\n")
    else:
        from cronfield.cli.formatters.console import format_field

        format_field(field, expression, use_names=use_names)


@app.command(name="next")
def next_values(
    kind: Annotated[FieldKind, typer.Argument(help="Field kind")],
    expression: Annotated[str, typer.Argument(help="Field expression")],
    start: Annotated[
        int, typer.Option("--start", "-s", help="Smallest value to consider")
    ] = 0,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Maximum number of values to list"),
    ] = None,
) -> None:
    """List selected values at or after a starting value."""
    field = _parse_or_exit(kind, expression)
    remaining = get_settings().enumerate_limit if limit is None else limit

    value = field.next(start)
    while value != -1 and remaining > 0:
        typer.echo(str(value))
        remaining -= 1
        value = field.next(value + 1)


@app.command()
def match(
    kind: Annotated[FieldKind, typer.Argument(help="Field kind")],
    expression: Annotated[str, typer.Argument(help="Field expression")],
    when: Annotated[datetime, typer.Argument(help="Instant to test")],
    since: Annotated[
        datetime | None,
        typer.Option("--since", help="Window start for stepped expressions"),
    ] = None,
) -> None:
    """Test whether an instant satisfies a field (exit 0 on match, 1 otherwise)."""
    field = _parse_or_exit(kind, expression)
    matched = field.match(when) if since is None else field.match_window(since, when)

    typer.echo("match" if matched else "no match")
    if not matched:
        raise typer.Exit(EXIT_NO_MATCH)


@app.command()
def version() -> None:
    """Show version information."""
    from cronfield import __version__

    typer.echo(f"cronfield v{__version__}")
