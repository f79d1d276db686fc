"""Rich table rendering helpers."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from typing import Any

from rich.table import Table

RESOURCE_COLUMNS = ["Name", "Resource Group", "Location", "State"]


def format_cell(value: Any) -> str:
    """Render a cell; nested dicts and lists are shown as compact JSON."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(format_cell(cell) for cell in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a key-value dict as a two-column table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, format_cell(value))
    return table


def resource_rows(resources: Iterable[Any]) -> list[list[Any]]:
    """Rows for ``RESOURCE_COLUMNS`` from decoded resources."""
    return [
        [r.name, r.resource_group, r.location, r.provisioning_state]
        for r in resources
    ]
