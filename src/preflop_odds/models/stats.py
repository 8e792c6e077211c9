"""Outcome and per-category statistics models."""

from dataclasses import dataclass
from enum import Enum

from preflop_odds.errors import DivisionUndefined, InvariantViolation


class Outcome(str, Enum):
    """Result of a single simulated hand, from the player's perspective."""
    WIN = "win"
    TIE = "tie"
    LOSS = "loss"


@dataclass
class CategoryStats:
    """Running totals for one starting-hand category.

    ``played == won + tied + lost`` holds after every mutation.
    """
    hole: str
    played: int = 0
    won: int = 0
    tied: int = 0
    lost: int = 0

    def __post_init__(self):
        self._check()

    def _check(self) -> None:
        counts = (self.played, self.won, self.tied, self.lost)
        if any(c < 0 for c in counts):
            raise InvariantViolation(f"Negative count in stats for {self.hole}: {counts}")
        if self.played != self.won + self.tied + self.lost:
            raise InvariantViolation(
                f"Stats for {self.hole} do not add up: played={self.played}, "
                f"won={self.won}, tied={self.tied}, lost={self.lost}"
            )

    def record(self, outcome: Outcome) -> None:
        """Count one finished trial."""
        won, tied, lost = self.won, self.tied, self.lost
        if outcome is Outcome.WIN:
            won += 1
        elif outcome is Outcome.TIE:
            tied += 1
        elif outcome is Outcome.LOSS:
            lost += 1
        else:
            raise InvariantViolation(f"Unknown outcome: {outcome!r}")

        self.played, self.won, self.tied, self.lost = self.played + 1, won, tied, lost

    def merge(self, other: "CategoryStats") -> None:
        """Add another partial total for the same category into this one."""
        if other.hole != self.hole:
            raise InvariantViolation(f"Cannot merge stats for {other.hole} into {self.hole}")
        other._check()
        self.played, self.won, self.tied, self.lost = (
            self.played + other.played,
            self.won + other.won,
            self.tied + other.tied,
            self.lost + other.lost,
        )

    def _percent(self, count: int) -> float:
        if not self.played:
            raise DivisionUndefined(f"No trials played for {self.hole}")
        return 100 * count / self.played

    @property
    def win_pct(self) -> float:
        return self._percent(self.won)

    @property
    def tie_pct(self) -> float:
        return self._percent(self.tied)

    @property
    def loss_pct(self) -> float:
        return self._percent(self.lost)
