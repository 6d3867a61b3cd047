"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
adapters read the same typed contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEMO_API_KEY = "DEMO_KEY"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "neo-tracker"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "neo-tracker"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "neo-tracker"
    return Path.home() / ".config" / "neo-tracker"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def get_default_log_file() -> Path:
    return get_user_config_dir() / "neo-tracker.log"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# NEO Tracker user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Values come from init kwargs, then `NEO_TRACKER_*` environment variables,
    then the project `.env`, then the per-user `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="NEO_TRACKER_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Project first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str = Field(
        default=DEMO_API_KEY,
        min_length=1,
        validation_alias=AliasChoices("api_key", "NEO_TRACKER_API_KEY", "API_KEY"),
        description="NASA API key. Falls back to the public demo key.",
    )
    api_base_url: str = Field(
        default="https://api.nasa.gov/neo/rest/v1",
        min_length=8,
        description="Base URL of the NeoWs REST API.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="neo-tracker/0.1",
        min_length=1,
        description="User-Agent sent to the API.",
    )

    margin_x: int = Field(default=3, ge=0, description="Left margin (columns).")
    margin_y: int = Field(default=3, ge=0, description="Top margin (rows).")
    typing_interval_seconds: float = Field(
        default=0.01,
        ge=0,
        description="Delay between characters when emulating typing.",
    )
    pause_seconds: float = Field(
        default=0.3,
        ge=0,
        description="Pause between welcome screen lines.",
    )
    done_pause_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Pause before the terminal is released.",
    )

    log_level: str = Field(default="INFO", min_length=1)
    log_file: Path | None = Field(
        default=None,
        description="Log file path. Defaults to the user config directory.",
    )

    @property
    def uses_demo_key(self) -> bool:
        return self.api_key == DEMO_API_KEY

    def without_pacing(self) -> "AppSettings":
        """Copy with every cosmetic delay set to zero."""

        return self.model_copy(
            update={
                "typing_interval_seconds": 0.0,
                "pause_seconds": 0.0,
                "done_pause_seconds": 0.0,
            }
        )
