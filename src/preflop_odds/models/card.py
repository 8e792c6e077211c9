"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum


class Suit(str, Enum):
    SPADES = "s"
    HEARTS = "h"
    CLUBS = "c"
    DIAMONDS = "d"


class Rank(str, Enum):
    # Declared high to low; the canonical deck is dealt in this order.
    ACE = "A"
    KING = "K"
    QUEEN = "Q"
    JACK = "J"
    TEN = "T"
    NINE = "9"
    EIGHT = "8"
    SEVEN = "7"
    SIX = "6"
    FIVE = "5"
    FOUR = "4"
    THREE = "3"
    TWO = "2"

    @property
    def numeric_value(self) -> int:
        values = {
            "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8,
            "9": 9, "T": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
        }
        return values[self.value]


@dataclass(frozen=True)
class Card:
    """A single playing card. Compared for equality only, never ordered."""
    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '2c'."""
        s = s.strip()
        if len(s) != 2:
            raise ValueError(f"Cannot parse card: {s}")
        return cls(Rank(s[0].upper()), Suit(s[1].lower()))

    def __repr__(self) -> str:
        return self.to_short()

    def to_short(self) -> str:
        """Return short string like 'Ah'."""
        return f"{self.rank.value}{self.suit.value}"
