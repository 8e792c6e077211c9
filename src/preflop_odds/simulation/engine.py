"""Monte Carlo simulation of starting hands against one random opponent."""

import logging
import secrets
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Dict, Iterable, Optional, Sequence

from preflop_odds.catalog import HOLE_CARDS, Holding
from preflop_odds.errors import InvalidArgument, InvariantViolation
from preflop_odds.models.card import Card
from preflop_odds.models.stats import CategoryStats, Outcome
from preflop_odds.simulation.deck import full_deck, remove_cards
from preflop_odds.simulation.evaluator import HandEvaluator, HandValue
from preflop_odds.simulation.sampler import RandBelow, sample

logger = logging.getLogger(__name__)

Evaluate = Callable[[Sequence[Card]], HandValue]

BOARD_SIZE = 5
HOLE_SIZE = 2
REMAINING_DECK_SIZE = 52 - HOLE_SIZE

# Ordered mapping of holding name to its stats, one per run.
SimulationResults = Dict[str, CategoryStats]


def compare_hands(player: HandValue, opponent: HandValue) -> Outcome:
    """Classify a showdown from the player's side.

    Category decides first; the rank within the category breaks ties.
    """
    if player.category > opponent.category:
        return Outcome.WIN
    if player.category < opponent.category:
        return Outcome.LOSS
    if player.rank > opponent.rank:
        return Outcome.WIN
    if player.rank < opponent.rank:
        return Outcome.LOSS
    return Outcome.TIE


def run_trial(remaining_deck: Sequence[Card], hole_cards: Sequence[Card],
              randbelow: RandBelow = secrets.randbelow,
              evaluate: Evaluate = HandEvaluator.evaluate) -> Outcome:
    """Deal one board and one opponent hand and return the player's outcome.

    The seven sampled cards are the five community cards followed by the
    opponent's two hole cards.
    """
    dealt = sample(remaining_deck, BOARD_SIZE + HOLE_SIZE, randbelow)
    board = dealt[:BOARD_SIZE]
    opponent_hole = dealt[BOARD_SIZE:]

    player_value = evaluate(list(hole_cards) + board)
    opponent_value = evaluate(board + opponent_hole)
    return compare_hands(player_value, opponent_value)


class TrialRunner:
    """Runs repeated trials for one starting-hand category."""

    def __init__(self, holding: Holding,
                 randbelow: RandBelow = secrets.randbelow,
                 evaluate: Evaluate = HandEvaluator.evaluate):
        """Prepare the 50-card deck left after removing the hole cards.

        Raises:
            InvariantViolation: if the holding's cards are malformed, which
                aborts the whole category.
        """
        if len(holding.cards) != HOLE_SIZE or len(set(holding.cards)) != HOLE_SIZE:
            raise InvariantViolation(f"Holding {holding.name} needs two distinct cards")
        remaining = remove_cards(full_deck(), holding.cards)
        if len(remaining) != REMAINING_DECK_SIZE:
            raise InvariantViolation(
                f"Deck should have {REMAINING_DECK_SIZE} cards after hole cards "
                f"have been removed, got {len(remaining)}"
            )

        self.holding = holding
        self.remaining_deck = remaining
        self._randbelow = randbelow
        self._evaluate = evaluate

    def run_trial(self) -> Outcome:
        return run_trial(self.remaining_deck, self.holding.cards,
                         self._randbelow, self._evaluate)

    def run(self, trials: int, stats: Optional[CategoryStats] = None) -> CategoryStats:
        """Play ``trials`` hands and record each outcome.

        Args:
            trials: Number of hands to simulate.
            stats: Accumulator to update; a new one is created if omitted.

        Returns:
            The updated stats.
        """
        if stats is None:
            stats = CategoryStats(hole=self.holding.name)
        for _ in range(trials):
            stats.record(self.run_trial())
        return stats


def _simulate_holding(holding: Holding, trials: int) -> CategoryStats:
    """Worker entry point; each process draws from its own OS random source."""
    return TrialRunner(holding).run(trials)


class SimulationEngine:
    """Orchestrates trials across starting-hand categories.

    Each call to :meth:`run` owns a fresh results mapping, so separate
    runs never share counts.
    """

    def __init__(self, randbelow: RandBelow = secrets.randbelow,
                 evaluate: Evaluate = HandEvaluator.evaluate,
                 workers: int = 1):
        if workers < 1:
            raise InvalidArgument(f"Workers must be at least 1, got {workers}")
        if workers > 1 and (randbelow is not secrets.randbelow
                            or evaluate is not HandEvaluator.evaluate):
            raise InvalidArgument("Worker processes only use the default random source and evaluator")
        self._randbelow = randbelow
        self._evaluate = evaluate
        self.workers = workers

    def run(self, trials: int,
            holdings: Optional[Iterable[Holding]] = None) -> SimulationResults:
        """Simulate ``trials`` hands for every holding.

        Args:
            trials: Hands to play per category, at least 1.
            holdings: Categories to simulate; the full catalog by default.

        Returns:
            Stats per holding name, in the order the holdings were given.
        """
        if isinstance(trials, bool) or not isinstance(trials, int) or trials < 1:
            raise InvalidArgument(f"Number of simulations must be greater than 0, got {trials!r}")
        holdings = list(dict.fromkeys(HOLE_CARDS.values() if holdings is None else holdings))

        results: SimulationResults = {
            h.name: CategoryStats(hole=h.name) for h in holdings
        }
        logger.info("Simulating %d hands for each of %d categories", trials, len(holdings))

        if self.workers > 1:
            self._run_parallel(trials, holdings, results)
        else:
            for holding in holdings:
                runner = TrialRunner(holding, self._randbelow, self._evaluate)
                runner.run(trials, results[holding.name])
                logger.debug("Finished %s: %s", holding.name, results[holding.name])

        return results

    def _run_parallel(self, trials: int, holdings: Sequence[Holding],
                      results: SimulationResults) -> None:
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            partials = executor.map(_simulate_holding, holdings,
                                    [trials] * len(holdings))
            for partial in partials:
                results[partial.hole].merge(partial)
                logger.debug("Finished %s: %s", partial.hole, results[partial.hole])
