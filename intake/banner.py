"""
Banner and UI components for Prospect Intake
"""

from typing import Dict, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from core._version import __version__
from core.models import ProspectRecord
from intake.timezones import display_name

# Global console instance
console = Console()


TAGLINE = "Upload prospects, map fields, schedule by timezone"


def show_banner():
    """Display the title panel"""
    panel = Panel(
        f"[bold cyan]Upload Prospects[/bold cyan]\n\n[dim]{TAGLINE}[/dim]\n[dim]v{__version__}[/dim]",
        border_style="cyan",
        padding=(1, 3),
    )
    console.print(panel)


def show_step(step: int, title: str, description: str = ""):
    """Show a step header"""
    console.print()
    header = f"[bold cyan]Step {step}: {title}[/bold cyan]"
    if description:
        console.print(f"{header}\n[dim]{description}[/dim]")
    else:
        console.print(header)


def show_success(message: str):
    console.print(f"☉ [green]{message}[/green]")


def show_error(message: str):
    console.print(f"☿ [red]{message}[/red]")


def show_warning(message: str):
    console.print(f"▲ [yellow]{message}[/yellow]")


def show_info(message: str):
    console.print(f"◈ [blue]{message}[/blue]")


def show_prospect_table(records: Sequence[ProspectRecord], default_timezone: str, title: str = ""):
    """Display prospects with their (effective) timezone"""
    table = Table(title=title or None, show_header=True, header_style="bold cyan")
    for column in ("First Name", "Last Name", "Email", "Company", "Title", "State", "Timezone"):
        table.add_column(column, overflow="fold")

    for r in records:
        table.add_row(
            r.first_name,
            r.last_name,
            r.email,
            r.company,
            r.title or "-",
            r.state or "-",
            display_name(r.timezone or default_timezone),
        )

    console.print(table)


def show_timezone_distribution(distribution: Dict[str, int]):
    """Show prospect counts per timezone"""
    table = Table(title="Timezone Summary", show_header=True, header_style="bold cyan")
    table.add_column("Timezone", style="cyan")
    table.add_column("Prospects", justify="right")
    table.add_column("Percentage", justify="right")

    total = sum(distribution.values())
    for tz, count in distribution.items():
        percentage = f"{count/total*100:.1f}%" if total > 0 else "0%"
        table.add_row(display_name(tz), str(count), percentage)

    console.print(table)


def show_launch_summary(campaign_name: str, prospect_count: int, distribution: Dict[str, int], output_path: str = ""):
    """Show the final launch panel"""
    zones = len(distribution)
    spread = ", ".join(f"{count} in {display_name(tz)}" for tz, count in distribution.items())
    body = (
        f"[bold green]Campaign launched![/bold green]\n\n"
        f"Campaign: [white]{campaign_name}[/white]\n"
        f"Prospects: [white]{prospect_count}[/white] across {zones} timezone{'s' if zones != 1 else ''}\n"
        f"Distribution: [white]{spread}[/white]"
    )
    if output_path:
        body += f"\nOutput: [cyan]{output_path}[/cyan]"
    console.print(Panel(body, border_style="green", padding=(1, 2)))
