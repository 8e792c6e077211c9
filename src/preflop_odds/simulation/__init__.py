"""Poker simulation module."""

from preflop_odds.simulation.deck import full_deck, remove_cards
from preflop_odds.simulation.sampler import sample
from preflop_odds.simulation.evaluator import HandEvaluator, HandRank, HandValue
from preflop_odds.simulation.engine import (
    SimulationEngine, SimulationResults, TrialRunner, compare_hands, run_trial,
)

__all__ = [
    "full_deck", "remove_cards", "sample",
    "HandEvaluator", "HandRank", "HandValue",
    "SimulationEngine", "SimulationResults", "TrialRunner", "compare_hands", "run_trial",
]
