"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import build_async_client
from core.app_info import get_app_version
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("/projects", params={"page": 1, "limit": 1})
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return False, str(exc) or exc.__class__.__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured API."""

    settings = AppSettings()

    table = Table(title="Angel Requests Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Version", "OK", get_app_version())
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Client mode", "OK", "shared pool" if settings.share_client else "per call")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="set-api")
def set_api(
    base_url: str = typer.Option(..., "--base-url", prompt="API base URL", help="TipChain API base address."),
    timeout: float | None = typer.Option(None, "--timeout", min=0.1, help="Per-request timeout (seconds)."),
) -> None:
    """Store the API address (and optional timeout) in the user config .env.

    Designed for packaged desktop builds: no manual .env editing.
    """

    base_url = base_url.strip()
    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base_url must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "ANGEL_REQUESTS_API_BASE_URL": base_url,
            "ANGEL_REQUESTS_HTTP_TIMEOUT_SECONDS": f"{timeout:g}" if timeout is not None else None,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {escape(str(env_path))}")
