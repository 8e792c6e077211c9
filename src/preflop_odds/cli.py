"""Preflop Odds CLI - Typer-based command line interface."""

import logging
import re
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from preflop_odds import config

app = typer.Typer(
    name="preflop-odds",
    help="Monte Carlo win/tie/loss rates for Texas Hold'em starting hands",
    add_completion=False,
)
err_console = Console(stderr=True)

_DIGITS = re.compile(r"[0-9]+")


def _fail(message: str, code: int = 2):
    err_console.print(f"[red]ERROR: {escape(message)}[/red]")
    raise typer.Exit(code)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    if not verbose and not isinstance(logging.getLevelName(level), int):
        _fail(f"Unknown log level in PREFLOP_ODDS_LOG_LEVEL: {config.LOG_LEVEL}")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _parse_trials(value: Optional[str]) -> int:
    if value is None:
        err_console.print("[red]ERROR: Supply a number of simulations.[/red]")
        err_console.print("Usage: preflop-odds TRIALS")
        raise typer.Exit(1)
    value = value.strip()
    if not _DIGITS.fullmatch(value) or int(value) < 1:
        _fail("Number of simulations must be greater than 0.")
    return int(value)


def _default_workers() -> int:
    value = config.WORKERS.strip()
    if not _DIGITS.fullmatch(value):
        _fail(f"PREFLOP_ODDS_WORKERS must be a whole number, got {config.WORKERS!r}")
    return int(value)


# Unknown options pass through so a negative count reaches the trial check.
@app.command(context_settings={"ignore_unknown_options": True})
def simulate(
    trials: Optional[str] = typer.Argument(None, metavar="TRIALS",
                                           help="Hands to simulate per starting hand"),
    hands: Optional[str] = typer.Option(None, "--hands", "-H",
                                        help="Comma-separated starting hands, e.g. AA,AKs,72o"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w",
                                          help="Worker processes to spread categories over "
                                               "(default: PREFLOP_ODDS_WORKERS, else 1)"),
    pretty: bool = typer.Option(False, "--pretty", help="Render a Rich table instead of TSV"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Simulate every starting hand against one random opponent and rank them."""
    from preflop_odds.catalog import select_holdings
    from preflop_odds.errors import InvalidArgument
    from preflop_odds.formatters.table import TableFormatter, build_report
    from preflop_odds.simulation.engine import SimulationEngine

    _setup_logging(verbose)
    count = _parse_trials(trials)
    if workers is None:
        workers = _default_workers()

    try:
        holdings = select_holdings(hands.split(",")) if hands else None
        engine = SimulationEngine(workers=workers)
    except InvalidArgument as e:
        _fail(str(e))

    results = engine.run(count, holdings)
    rows = build_report(results)

    fmt = TableFormatter(Console())
    if pretty:
        fmt.print_table(rows, count)
    else:
        fmt.print_tsv(rows)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
