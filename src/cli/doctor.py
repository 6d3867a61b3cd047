"""Doctor command for environment diagnostics."""

from __future__ import annotations

from datetime import date

import typer
from rich.console import Console

from adapters.neo_api import NeoWsFetcher
from cli.ui_components import build_doctor_table
from core.config import AppSettings, get_default_log_file, write_user_env_vars
from core.domain.models import DateRange, FetchSuccess

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Issue a one-day feed request with the configured key."""

    fetcher = NeoWsFetcher(settings)
    today = date.today()
    result = fetcher.fetch_feed(DateRange(start=today, end=today))
    if isinstance(result, FetchSuccess):
        count = result.payload.get("element_count")
        return True, f"feed OK ({count} objects)" if count is not None else "feed OK"
    if result.status == "not_found":
        return False, "HTTP 404"
    return False, result.message


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = build_doctor_table()

    if settings.uses_demo_key:
        table.add_row("API key", "DEMO", "Public demo key (low rate limit) -> `neo-tracker doctor set-key`")
    else:
        table.add_row("API key", "OK", "Custom key configured")
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_api, detail_api = _check_api(settings)
    table.add_row("NeoWs connectivity", "OK" if ok_api else "FAIL", detail_api)

    table.add_row("Log file", "OK", str(settings.log_file or get_default_log_file()))

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="set-key")
def set_key() -> None:
    """Interactive API key setup (stored in the user config .env)."""

    api_key = typer.prompt("NASA API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("api key is required")

    env_path = write_user_env_vars({"NEO_TRACKER_API_KEY": api_key})

    _console.print(f"[green]Saved API key to:[/green] {env_path}")
