"""Catalog of the 169 named starting-hand categories.

Each category is represented by one literal pair of hole cards: pairs as
spades and hearts, suited hands in spades, offsuit hands as a spade over
a heart. Suits are interchangeable preflop, so any representative gives
the same odds.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from preflop_odds.errors import InvalidArgument
from preflop_odds.models.card import Card, Rank, Suit


@dataclass(frozen=True)
class Holding:
    """A named starting-hand category and its two representative cards."""
    name: str
    cards: Tuple[Card, Card]


def _build_catalog() -> Dict[str, Holding]:
    holdings: Dict[str, Holding] = {}
    ranks = list(Rank)
    for i, high in enumerate(ranks):
        for low in ranks[i:]:
            if high == low:
                name = f"{high.value}{low.value}"
                holdings[name] = Holding(name, (Card(high, Suit.SPADES), Card(low, Suit.HEARTS)))
                continue
            suited = f"{high.value}{low.value}s"
            holdings[suited] = Holding(suited, (Card(high, Suit.SPADES), Card(low, Suit.SPADES)))
            offsuit = f"{high.value}{low.value}o"
            holdings[offsuit] = Holding(offsuit, (Card(high, Suit.SPADES), Card(low, Suit.HEARTS)))
    return holdings


HOLE_CARDS: Mapping[str, Holding] = MappingProxyType(_build_catalog())


def select_holdings(names: Iterable[str]) -> List[Holding]:
    """Look up holdings by name, keeping the order given.

    Raises:
        InvalidArgument: for a name missing from the catalog.
    """
    selected = []
    for name in names:
        name = name.strip()
        if name not in HOLE_CARDS:
            raise InvalidArgument(f"Unknown starting hand: {name}")
        selected.append(HOLE_CARDS[name])
    return selected
