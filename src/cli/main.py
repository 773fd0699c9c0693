"""Angel Requests CLI (Typer).

Every front-end command is also available here for manual use, plus:
- `bridge`: serve the commands over stdin/stdout (JSON lines) for a UI process.
- `doctor`: configuration and connectivity checks.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.text import Text

from adapters.tipchain_api import TipChainClient
from cli import doctor
from cli.ui_components import (
    build_creator_panel,
    build_project_panel,
    build_projects_table,
    print_banner,
    print_error,
)
from core.app_info import get_app_version, greet as greet_message
from core.config import AppSettings
from core.domain.models import TipRequest, WireModel
from core.domain.results import GatewayResult
from core.logging_config import configure_logging
from core.services.bridge import StdioBridge
from core.services.commands import CommandRegistry

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="TipChain projects, creators and tips from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def build_client(settings: AppSettings) -> TipChainClient:
    return TipChainClient(settings)


def _call(operation: Callable[[TipChainClient], Awaitable[GatewayResult[T]]]) -> T:
    settings = AppSettings()

    async def _go() -> GatewayResult[T]:
        async with build_client(settings) as client:
            return await operation(client)

    result = asyncio.run(_go())
    if not result.ok:
        if result.error is not None:
            print_error(_console, result.error)
        raise typer.Exit(code=1)
    return result.value  # type: ignore[return-value]


def _print_json(value: Any) -> None:
    if isinstance(value, WireModel):
        value = value.to_wire()
    _console.print_json(json.dumps(value, ensure_ascii=False))


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override ANGEL_REQUESTS_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    configure_logging(log_level or AppSettings().log_level)


@app.command()
def greet(name: str = typer.Argument(..., help="Name to greet.")) -> None:
    """Local smoke test; no network call."""

    _console.print(Text(greet_message(name)))


@app.command()
def version() -> None:
    """Print the application version."""

    _console.print(Text(get_app_version()))


@app.command()
def projects(
    page: int = typer.Option(1, "--page", help="Page number (forwarded as-is)."),
    limit: int | None = typer.Option(None, "--limit", help="Page size (defaults to the configured limit)."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw page as JSON."),
) -> None:
    """List projects."""

    result = _call(lambda client: client.list_projects(page=page, limit=limit))
    if as_json:
        _print_json(result)
        return
    print_banner(_console)
    _console.print(build_projects_table(result))


@app.command()
def project(
    uid: str = typer.Argument(..., help="Project UID."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw project as JSON."),
) -> None:
    """Show one project."""

    result = _call(lambda client: client.get_project(uid))
    if as_json:
        _print_json(result)
        return
    _console.print(build_project_panel(result))


@app.command()
def creator(
    address: str = typer.Argument(..., help="Creator address or basename."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw profile as JSON."),
) -> None:
    """Show a creator profile."""

    result = _call(lambda client: client.get_creator(address))
    if as_json:
        _print_json(result)
        return
    _console.print(build_creator_panel(result))


@app.command()
def register(
    basename: str = typer.Argument(..., help="Unique basename."),
    display_name: str = typer.Option(..., "--display-name", help="Public display name."),
    bio: str = typer.Option("", "--bio", help="Short bio."),
    avatar_url: str = typer.Option("", "--avatar-url", help="Avatar image URL."),
) -> None:
    """Register a creator."""

    _call(lambda client: client.register_creator(basename, display_name, bio, avatar_url))
    _console.print(Text(f"Registered {basename}", style="green"))


@app.command()
def tip(
    to: str = typer.Argument(..., help="Recipient identifier."),
    amount: str = typer.Argument(..., help="Decimal amount, sent as text."),
    message: str = typer.Option("", "--message", "-m", help="Message for the recipient."),
    token: str | None = typer.Option(None, "--token", help="Token symbol (defaults to the configured token)."),
) -> None:
    """Send a tip."""

    request = TipRequest(to=to, amount=amount, message=message, token=token)
    confirmation = _call(lambda client: client.send_tip(request))
    _console.print(Text(confirmation, style="green"))


@app.command()
def bridge() -> None:
    """Serve commands as JSON lines on stdin/stdout for a UI process."""

    settings = AppSettings()

    async def _serve() -> None:
        async with build_client(settings) as client:
            await StdioBridge(CommandRegistry(client)).serve()

    asyncio.run(_serve())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
