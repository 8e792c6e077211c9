"""Data models for the preflop odds simulator."""

from preflop_odds.models.card import Card, Rank, Suit
from preflop_odds.models.stats import Outcome, CategoryStats

__all__ = [
    "Card", "Rank", "Suit",
    "Outcome", "CategoryStats",
]
