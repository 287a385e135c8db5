"""
Interactive field mapper

Provides a Rich UI for mapping source CSV columns to prospect fields.
Nothing is pre-selected: every mapping is chosen by the user.
"""

from typing import Callable, List, Optional, Sequence

from rich.prompt import Prompt
from rich.table import Table

from core.models import ColumnMapping, TargetField
from ..banner import console
from .field_mapper import describe_status, mapping_status

OnChange = Callable[[str, Optional[TargetField]], Sequence[ColumnMapping]]

CONTINUE = 'continue'
BACK = 'back'

UNMAP_CHOICES = {'-', 'none', 'skip', "don't map", 'unmapped'}


class InteractiveMapper:
    """
    Interactive column mapping with Rich UI.

    Example:
        mapper = InteractiveMapper()
        choice = mapper.map(session.mappings, on_change)
    """

    def map(self, mappings: Sequence[ColumnMapping], on_change: OnChange) -> str:
        """
        Let the user edit mappings until they continue or go back.

        Args:
            mappings: Current column mappings
            on_change: Called with (column, target); returns the updated mappings

        Returns:
            CONTINUE or BACK
        """
        while True:
            console.print()
            self._show_mappings(mappings)
            status = mapping_status(mappings)
            style = "green" if status.all_required_mapped else "yellow"
            console.print(f"[{style}]{describe_status(status)}[/{style}]")
            console.print("[dim]Type a column [bold]#[/bold] or [bold]name[/bold] to map it · Enter = continue · b = back[/dim]")

            user_input = Prompt.ask("[cyan]Column[/cyan]", default="", show_default=False).strip()

            if not user_input:
                return CONTINUE
            if user_input.lower() == 'b':
                return BACK

            column = self._match_column(user_input, [m.name for m in mappings])
            if column is None:
                continue

            mappings = on_change(column, self._prompt_target(column))

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _show_mappings(self, mappings: Sequence[ColumnMapping]):
        table = Table(title="Map CSV Fields", show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("Column Name", style="cyan bold")
        table.add_column("Sample", style="white", overflow="fold")
        table.add_column("Maps To", style="green")
        table.add_column("", justify="center")

        for i, m in enumerate(mappings, 1):
            sample = m.sample_value[:40] + ("..." if len(m.sample_value) > 40 else "")
            if m.target is None:
                target, badge = "[dim]Don't map[/dim]", ""
            else:
                target = m.target.label
                badge = "Required" if m.target.required else "[dim]Optional[/dim]"
            table.add_row(f"{i}.", m.name, sample or "[dim]<empty>[/dim]", target, badge)

        console.print(table)

    def _match_column(self, user_input: str, names: List[str]) -> Optional[str]:
        # Numeric index
        if user_input.isdigit():
            index = int(user_input) - 1
            if 0 <= index < len(names):
                return names[index]
            console.print(f"  [red]☿ Invalid — must be 1–{len(names)}[/red]")
            return None

        # Exact name match
        if user_input in names:
            return user_input

        # Substring match
        matches = [n for n in names if user_input.lower() in n.lower()]
        if len(matches) == 1:
            return matches[0]
        if matches:
            console.print(f"  [yellow]Did you mean:[/yellow] {', '.join(matches[:5])}")
        else:
            console.print(f"  [red]☿ Not found:[/red] '{user_input}'")
        return None

    def _prompt_target(self, column: str) -> Optional[TargetField]:
        fields = list(TargetField)
        options = "  ".join(
            f"[bold]{i}[/bold] {f.label}{'*' if f.required else ''}" for i, f in enumerate(fields, 1)
        )
        console.print(f"[bold cyan]{column}[/bold cyan] →  {options}  [bold]-[/bold] Don't map")

        while True:
            answer = Prompt.ask("  [cyan]→[/cyan]", default="-", show_default=False).strip()
            if answer.lower() in UNMAP_CHOICES:
                console.print("  [dim]— unmapped[/dim]")
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(fields):
                target = fields[int(answer) - 1]
            else:
                target = TargetField.parse(answer)
            if target is not None:
                console.print(f"  [green]☉ {column} → {target.label}[/green]")
                return target
            console.print(f"  [red]☿ Unknown field:[/red] '{answer}'")
