"""CLI entry point (Typer).

`neo-tracker` with no sub-command starts the interactive curses tracker;
`neo-tracker doctor ...` runs diagnostics.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.curses_surface import open_curses_surface
from adapters.neo_api import NeoWsFetcher
from cli import doctor
from cli.application import Application
from cli.ui_components import print_error
from core.config import AppSettings
from core.logging_utils import configure_logging

EXIT_INTERRUPTED = 130

app = typer.Typer(
    help="Browse near-Earth objects from the NASA NeoWs service.",
    invoke_without_command=True,
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)


def build_settings(
    *,
    api_key: str | None = None,
    no_typing: bool = False,
    log_file: Path | None = None,
) -> AppSettings:
    overrides: dict[str, object] = {}
    if api_key:
        overrides["api_key"] = api_key
    if log_file is not None:
        overrides["log_file"] = log_file

    settings = AppSettings(**overrides)
    if no_typing:
        settings = settings.without_pacing()
    return settings


@app.callback()
def track(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="NASA API key (defaults to $API_KEY, then DEMO_KEY).",
        show_default=False,
    ),
    no_typing: bool = typer.Option(
        False,
        "--no-typing",
        help="Skip typing emulation and cosmetic pauses.",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write logs to this file instead of the user config directory.",
        dir_okay=False,
    ),
) -> None:
    """Run the interactive NEO tracker."""

    if ctx.invoked_subcommand is not None:
        return

    settings = build_settings(api_key=api_key, no_typing=no_typing, log_file=log_file)
    configure_logging(settings)

    application = Application(open_curses_surface, NeoWsFetcher(settings), settings)
    try:
        exit_code = application.run()
    except KeyboardInterrupt:
        raise typer.Exit(code=EXIT_INTERRUPTED)

    if application.fatal_error is not None:
        print_error(_err_console, application.fatal_error)
    raise typer.Exit(code=exit_code)


def run() -> None:
    app()
