# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for parsed fields."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from cronfield.cli.formatters.json_fmt import field_summary
from cronfield.fields.field import CronField

console = Console()


def format_field(field: CronField, expression: str, *, use_names: bool = False) -> None:
    """Print a parsed field with Rich formatting."""
    summary = field_summary(field, expression, use_names=use_names)

    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_column("key", style="dim")
    info_table.add_column("value")
    info_table.add_row("Kind:", summary["kind"])
    info_table.add_row("Expression:", expression or "(empty)")
    info_table.add_row("Canonical:", f"[bold]{summary['canonical'] or '-'}[/bold]")
    info_table.add_row("Step:", str(summary["every"]) if summary["every"] else "-")
    if field.spec.occurrence_allowed:
        info_table.add_row("Occurrence:", str(summary["occurrence"] or "-"))
    console.print(info_table)
    console.print()

    values = summary["values"]
    if not values:
        console.print("[yellow]No values selected.[/yellow]")
        return

    table = Table(title=f"Selected values ({len(values)})")
    table.add_column("Value", justify="right", style="cyan")
    if field.spec.names is not None:
        table.add_column("Name")
    for value in values:
        row = [str(value)]
        if field.spec.names is not None:
            row.append(field.spec.format_value(value))
        table.add_row(*row)
    console.print(table)
