"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.app_info import APP_NAME, get_app_version
from core.domain.models import Creator, Project, ProjectPage
from core.domain.results import GatewayError


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive commands only, never the bridge)."""

    title = Text(APP_NAME, style="bold cyan")
    subtitle = Text(f"TipChain projects • creators • tips  v{get_app_version()}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_projects_table(page: ProjectPage) -> Table:
    info = page.page_info
    table = Table(title=f"Projects (page {info.page}, {info.page_limit}/page, {info.total_items} total)")
    table.add_column("UID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Slug", style="magenta")
    table.add_column("Recipient", style="green")
    table.add_column("Updated", style="dim")
    for project in page.data:
        table.add_row(
            *(Text(cell) for cell in (project.uid, project.title, project.slug, project.recipient, project.updated_at))
        )
    return table


def build_project_panel(project: Project) -> Panel:
    body = Text()
    body.append(project.description.strip() + "\n\n")
    body.append("Recipient: ", style="bold")
    body.append(project.recipient + "\n")
    body.append("Slug: ", style="bold")
    body.append(project.slug + "\n")
    if project.no_of_grants is not None:
        body.append("Grants: ", style="bold")
        body.append(f"{project.no_of_grants}\n")
    body.append(f"\nCreated {project.created_at} • updated {project.updated_at}", style="dim")
    return Panel(body, title=Text(project.title, style="bold cyan"), border_style="cyan")


def build_creator_panel(creator: Creator) -> Panel:
    """Panel for a creator profile; the tip total is shown as received (decimal text)."""

    status = Text("active", style="green") if creator.is_active else Text("inactive", style="red")
    body = Text()
    body.append(creator.bio.strip() + "\n\n")
    body.append("Basename: ", style="bold")
    body.append(creator.basename + "\n")
    body.append("Tips: ", style="bold")
    body.append(f"{creator.tip_count} ({creator.total_tips_received} received)\n")
    body.append("Status: ", style="bold")
    body.append_text(status)
    if creator.avatar_url:
        body.append(f"\nAvatar: {creator.avatar_url}", style="dim")

    return Panel(body, title=Text(creator.display_name, style="bold yellow"), border_style="yellow")


def print_error(console: Console, error: GatewayError) -> None:
    console.print(Text(error.message, style="red"))
