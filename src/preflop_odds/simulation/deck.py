"""The 52-card deck and removal of known cards."""

from typing import Iterable, Tuple

from preflop_odds.errors import InvariantViolation
from preflop_odds.models.card import Card, Rank, Suit

DeckCards = Tuple[Card, ...]


def _build_full_deck() -> DeckCards:
    cards = []
    for suit in Suit:
        for rank in Rank:
            cards.append(Card(rank, suit))
    return tuple(cards)


_FULL_DECK = _build_full_deck()


def full_deck() -> DeckCards:
    """Return the canonical 52-card deck, As Ks ... 2d."""
    return _FULL_DECK


def remove_cards(deck: Iterable[Card], excluded: Iterable[Card]) -> DeckCards:
    """Return ``deck`` without the ``excluded`` cards, keeping order.

    Raises:
        InvariantViolation: if ``excluded`` is not a duplicate-free subset
            of ``deck``.
    """
    deck = tuple(deck)
    excluded = list(excluded)
    excluded_set = set(excluded)
    remaining = tuple(card for card in deck if card not in excluded_set)

    expected = len(deck) - len(excluded)
    if len(remaining) != expected:
        raise InvariantViolation(
            f"Deck should have {expected} cards after removing "
            f"{' '.join(c.to_short() for c in excluded)}, got {len(remaining)}"
        )
    return remaining
