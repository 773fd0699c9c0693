"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP client, gateway) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.app_info import APP_SLUG, get_app_version

DEFAULT_API_BASE_URL = "https://tipchain-api.deno.dev"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies).

    Lets a packaged desktop build be configured without editing a `.env`
    inside the project tree.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_SLUG
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_SLUG

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_SLUG
    return Path.home() / ".config" / APP_SLUG


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


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


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# Angel Requests user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without leaking into the Core.
    - A single configuration contract for CLI, bridge and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANGEL_REQUESTS_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config (packaged builds).
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="Base address of the TipChain API.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default_factory=lambda: f"{APP_SLUG}/{get_app_version()}",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    share_client: bool = Field(
        default=False,
        description="Reuse one pooled HTTP client across calls instead of one client per call.",
    )

    default_page_limit: int = Field(
        default=20,
        ge=1,
        description="Page size used when a listing call omits `limit`.",
    )
    default_tip_token: str = Field(
        default="ETH",
        min_length=1,
        description="Token symbol substituted when a tip request carries none.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )
