"""Rich UI components used outside of the curses screen.

The curses session owns the terminal while it runs; anything printed here
happens before it starts or after it has been released.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.errors import NeoTrackerError, TerminalIOError


def build_error_panel(error: NeoTrackerError) -> Panel:
    """Panel for a fatal error reported by the tracker."""

    title = "Terminal error" if isinstance(error, TerminalIOError) else "Request failed"
    body = Text(str(error) or error.__class__.__name__)
    body.append(f"\n\nExit code: {error.exit_code}", style="dim")
    return Panel(body, title=Text(title, style="bold red"), border_style="red")


def print_error(console: Console, error: NeoTrackerError) -> None:
    console.print(build_error_panel(error))


def build_doctor_table() -> Table:
    table = Table(title="NEO Tracker Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
