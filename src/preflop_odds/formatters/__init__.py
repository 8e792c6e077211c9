"""Output formatting for terminal and tables."""

from preflop_odds.formatters.table import (
    ReportRow, TableFormatter, build_report, rank_results,
)

__all__ = ["ReportRow", "TableFormatter", "build_report", "rank_results"]
