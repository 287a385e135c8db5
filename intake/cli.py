"""
Prospect Intake CLI

Usage:
    python run.py                    # Interactive upload wizard
    python run.py upload FILE.csv    # Start the wizard with a file
    python run.py config             # Show configuration status
    python run.py version            # Show version
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from rich.prompt import Confirm, Prompt
from rich.table import Table

from core._version import __version__
from core.config import IntakeConfig, get_config
from core.log import get_logger, setup_logging
from core.models import LaunchPayload
from .banner import (
    console,
    show_banner,
    show_error,
    show_info,
    show_launch_summary,
    show_prospect_table,
    show_step,
    show_success,
    show_timezone_distribution,
    show_warning,
)
from .exporters import BatchExporter
from .mappers import InteractiveMapper
from .mappers.interactive_mapper import BACK
from .timezones import TIMEZONE_OPTIONS, display_name, format_option
from .wizard import (
    Back,
    ChooseDefaultTimezone,
    ConfirmMapping,
    ConfirmTimezone,
    Exit,
    Launch,
    MapColumn,
    Stage,
    WizardController,
    preview_summary,
    timezone_distribution,
    without_state_preview,
)

logger = get_logger(__name__)


class UploadWizard:
    """Interactive front end: one Rich screen per wizard stage."""

    def __init__(self, config: IntakeConfig, initial_file: Optional[str] = None):
        self.config = config
        self.initial_file = initial_file
        self.exporter = BatchExporter(config.output_dir)
        self.controller = WizardController(
            launcher=self._launch,
            navigator=self._navigate,
            config=config,
        )

    def run(self) -> int:
        show_banner()
        steps = {
            Stage.UPLOAD: self._upload_step,
            Stage.MAPPING: self._mapping_step,
            Stage.TIMEZONE: self._timezone_step,
            Stage.PREVIEW: self._preview_step,
        }
        while self.controller.active:
            stage = self.controller.session.stage
            show_step(stage.number, stage.heading)
            steps[stage]()

        return 0 if self.controller.exit == Exit.LAUNCHED else 1

    # ── Collaborators ─────────────────────────────────────────────────────────

    def _launch(self, payload: LaunchPayload):
        path = self.exporter(payload)
        show_launch_summary(
            payload.campaign.campaign_name,
            payload.prospect_count,
            payload.timezone_distribution,
            str(path),
        )

    def _navigate(self, view: str, payload=None):
        logger.info("Leaving wizard for %s", view)
        if view != 'dashboard':
            show_info("Upload cancelled")

    # ── Steps ─────────────────────────────────────────────────────────────────

    def _upload_step(self):
        console.print("[dim]CSV with a header row · required: first name, last name, company, email[/dim]")
        console.print("[dim]Include a state column for automatic timezone assignment · max 1000 prospects[/dim]")

        file_path = self.initial_file or Prompt.ask("[cyan]CSV file path[/cyan] [dim](b = back)[/dim]").strip()
        self.initial_file = None

        if file_path.lower() == 'b':
            self.controller.dispatch(Back())
            return

        session = asyncio.run(self.controller.load_file(file_path))
        if session is None:
            return
        if session.error:
            show_error(session.error)
            return

        show_success(f"{session.file_name} ({session.parse_result.kept_row_count} prospects loaded)")
        if session.notice:
            show_warning(session.notice)

    def _mapping_step(self):
        def on_change(column, target):
            return self.controller.dispatch(MapColumn(column, target)).mappings

        choice = InteractiveMapper().map(self.controller.session.mappings, on_change)
        if choice == BACK:
            self.controller.dispatch(Back())
            return

        session = self.controller.dispatch(ConfirmMapping())
        if session.stage == Stage.MAPPING and session.notice:
            show_warning(session.notice)

    def _timezone_step(self):
        session = self.controller.session
        shown, more = without_state_preview(session.batch)

        show_warning(
            f"{len(session.batch.without_state)} prospects don't have state information. "
            "Please assign a timezone for scheduling meetings."
        )
        for record in shown:
            console.print(f"  [dim]•[/dim] {record.display_name} - {record.company}")
        if more:
            console.print(f"  [dim]+{more} more prospects[/dim]")

        while True:
            session = self.controller.session
            console.print()
            show_timezone_distribution(timezone_distribution(session.batch.records, session.default_timezone))

            for i, option in enumerate(TIMEZONE_OPTIONS, 1):
                marker = "[green]☉[/green]" if option.value == session.default_timezone else " "
                console.print(f"  {marker} [bold]{i}[/bold] {format_option(option.value)}")

            answer = Prompt.ask(
                f"[cyan]Default timezone[/cyan] [dim](Enter = {display_name(session.default_timezone)}, b = back)[/dim]",
                default="",
                show_default=False,
            ).strip()

            if not answer:
                self.controller.dispatch(ConfirmTimezone())
                return
            if answer.lower() == 'b':
                self.controller.dispatch(Back())
                return
            if answer.isdigit() and 1 <= int(answer) <= len(TIMEZONE_OPTIONS):
                self.controller.dispatch(ChooseDefaultTimezone(TIMEZONE_OPTIONS[int(answer) - 1].value))
            else:
                show_error(f"Choose 1–{len(TIMEZONE_OPTIONS)}")

    def _preview_step(self):
        session = self.controller.session
        summary = preview_summary(session.batch, session.default_timezone, session.calendar_invites_per_day)

        table = Table(show_header=False, box=None)
        table.add_column(style="dim")
        table.add_column(style="bold white")
        table.add_row("Total Prospects", str(summary.prospect_count))
        table.add_row("Estimated Duration", f"{summary.estimated_days} days")
        table.add_row("Timezones", f"{summary.timezone_count} zones")
        console.print(table)

        show_prospect_table(summary.first_records, session.default_timezone, title="Prospect Preview")
        if summary.hidden_count:
            console.print(f"[dim]Showing first {len(summary.first_records)} of {summary.prospect_count} prospects[/dim]")

        if not Confirm.ask(
            f"I confirm that I want to launch this campaign with {summary.prospect_count} prospects",
            default=False,
        ):
            self.controller.dispatch(Back())
            return

        self.controller.dispatch(Launch())


def show_config(config: IntakeConfig):
    status = config.get_config_status()

    table = Table(title=f"{status['framework']['name']} v{status['framework']['version']}", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    for key, value in status['intake'].items():
        table.add_row(key, str(value))

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prospect-intake", description="Upload prospects for a campaign")
    subparsers = parser.add_subparsers(dest="command")

    upload = subparsers.add_parser("upload", help="Run the upload wizard (default)")
    upload.add_argument("file", nargs="?", help="CSV file to upload")

    subparsers.add_parser("config", help="Show configuration status")
    subparsers.add_parser("version", help="Show version")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    setup_logging(config.log_level)

    if args.command == "version":
        console.print(f"Prospect Intake v{__version__}")
        return 0

    if args.command == "config":
        show_config(config)
        return 0

    try:
        return UploadWizard(config, getattr(args, "file", None)).run()
    except KeyboardInterrupt:
        console.print()
        show_warning("Interrupted")
        return 130


if __name__ == '__main__':
    sys.exit(main())
