"""CLI UI components (Rich).

Keeps visual details out of the command functions so `main` and `doctor`
share the same banner and tables.
"""

from __future__ import annotations

import json
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from risport70.core.config import RisPortSettings


def print_banner(console: Console) -> None:
    """Welcome banner; skipped with `--no-banner` or `--raw` (pipelines)."""

    title = Text("RISPort70", style="bold cyan")
    subtitle = Text("CUCM real-time device status • SOAP", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_settings_table(settings: RisPortSettings, title: str = "Connection") -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in settings.masked().items():
        table.add_row(key, value)
    return table


def print_result(console: Console, result: Any, *, raw: bool = False) -> None:
    """Print a response Body as JSON (highlighted, or plain for `--raw`)."""

    if raw:
        console.print(json.dumps(result, indent=2, ensure_ascii=False), markup=False, highlight=False, soft_wrap=True)
        return
    console.print_json(data=result)
