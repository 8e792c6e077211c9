"""Ranking of simulation results and their tabular output."""

import logging
import math
import sys
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, TextIO

from rich.console import Console
from rich.table import Table

from preflop_odds.errors import DivisionUndefined
from preflop_odds.models.stats import CategoryStats

logger = logging.getLogger(__name__)

TSV_HEADER = ("Hole", "Plays", "Won", "Tied", "Lost", "|", "Win%", "Tie%", "Loss%")


@dataclass(frozen=True)
class ReportRow:
    """One category's counts and percentages, ready for display."""
    hole: str
    played: int
    won: int
    tied: int
    lost: int
    win_pct: float
    tie_pct: float
    loss_pct: float

    @classmethod
    def from_stats(cls, stats: CategoryStats) -> "ReportRow":
        try:
            pcts = (stats.win_pct, stats.tie_pct, stats.loss_pct)
        except DivisionUndefined:
            logger.warning("No trials played for %s, percentages undefined", stats.hole)
            pcts = (math.nan, math.nan, math.nan)
        return cls(stats.hole, stats.played, stats.won, stats.tied, stats.lost, *pcts)


def rank_results(results: Mapping[str, CategoryStats]) -> List[CategoryStats]:
    """Order categories by most wins, then most ties.

    ``sorted`` is stable, so categories with equal wins and ties keep the
    order they had in ``results``.
    """
    return sorted(results.values(), key=lambda s: (-s.won, -s.tied))


def build_report(results: Mapping[str, CategoryStats]) -> List[ReportRow]:
    """Rank the results and compute percentages for each category."""
    return [ReportRow.from_stats(s) for s in rank_results(results)]


def format_percent(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return repr(value)


class TableFormatter:
    """Write a simulation report as tab-separated text or a Rich table."""

    def __init__(self, console: Optional[Console] = None, file: Optional[TextIO] = None):
        self.console = console or Console()
        self.file = file

    def print_tsv(self, rows: Iterable[ReportRow]) -> None:
        """Print the tab-separated report, header first."""
        out = self.file or sys.stdout
        print("\t".join(TSV_HEADER), file=out)
        for row in rows:
            fields = [
                row.hole, str(row.played), str(row.won), str(row.tied), str(row.lost), "|",
                format_percent(row.win_pct),
                format_percent(row.tie_pct),
                format_percent(row.loss_pct),
            ]
            print("\t".join(fields), file=out)

    def print_table(self, rows: List[ReportRow], trials: int) -> None:
        """Print the report as a Rich table."""
        if not rows:
            self.console.print("[dim]No results.[/dim]")
            return

        table = Table(title=f"Starting Hands vs One Random Opponent ({trials} hands each)")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Hole", style="cyan")
        table.add_column("Plays", justify="right")
        table.add_column("Won", justify="right")
        table.add_column("Tied", justify="right")
        table.add_column("Lost", justify="right")
        table.add_column("Win%", justify="right", style="green")
        table.add_column("Tie%", justify="right", style="yellow")
        table.add_column("Loss%", justify="right", style="red")

        for i, row in enumerate(rows, 1):
            table.add_row(
                str(i),
                row.hole,
                str(row.played),
                str(row.won),
                str(row.tied),
                str(row.lost),
                f"{row.win_pct:.2f}",
                f"{row.tie_pct:.2f}",
                f"{row.loss_pct:.2f}",
            )

        self.console.print(table)
