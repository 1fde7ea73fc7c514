"""Rich terminal reporter."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table

from patchstat.stats.models import DiffStat


def render(
    total: DiffStat,
    per_source: Optional[List[DiffStat]] = None,
    *,
    show_summary: bool = True,
    show_table: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print the diffstat to stdout using Rich."""
    console = console or Console()

    if show_table and per_source:
        table = Table(title="Diffstat", border_style="dim", title_style="bold")
        table.add_column("Source", style="magenta", overflow="fold")
        table.add_column("Files", justify="right")
        table.add_column("Hunks", justify="right")
        table.add_column("+", justify="right", style="green")
        table.add_column("-", justify="right", style="red")
        table.add_column("!", justify="right", style="yellow")
        table.add_column("Junk", justify="right", style="dim")
        for stat in per_source:
            table.add_row(
                stat.sources[0] if stat.sources else "-",
                str(stat.files),
                str(stat.hunks),
                str(stat.insertions),
                str(stat.deletions),
                str(stat.modifications),
                str(stat.junk),
            )
        console.print(table)

    if show_summary:
        console.print(total.summary(), markup=False, highlight=False, soft_wrap=True)
