"""Unbiased sampling without replacement from a deck."""

import secrets
from typing import Callable, Dict, List, Sequence

from preflop_odds.errors import InvalidArgument, InvariantViolation
from preflop_odds.models.card import Card

# Returns an integer uniformly drawn from [0, bound).
RandBelow = Callable[[int], int]


def sample(deck: Sequence[Card], n: int,
           randbelow: RandBelow = secrets.randbelow) -> List[Card]:
    """Draw ``n`` distinct cards from ``deck`` uniformly at random.

    Partial Fisher-Yates: draw an index below the current size, emit the
    card at that position, then move the last live card into the hole and
    shrink the size by one. Moved cards are tracked in a sparse view so
    ``deck`` itself is never copied or mutated.

    Args:
        deck: Cards to draw from.
        n: Number of cards to draw, ``0 <= n <= len(deck)``.
        randbelow: Random-integer source. Defaults to the OS CSPRNG;
            tests inject a fixed sequence.

    Returns:
        The drawn cards in draw order.
    """
    size = len(deck)
    if not isinstance(n, int) or isinstance(n, bool) or not 0 <= n <= size:
        raise InvalidArgument(f"Cannot draw {n!r} cards from a deck of {size}")

    view: Dict[int, Card] = {}
    drawn: List[Card] = []
    for _ in range(n):
        i = randbelow(size)
        if not 0 <= i < size:
            raise InvariantViolation(f"Random source returned {i} for bound {size}")
        drawn.append(view.get(i, deck[i]))
        size -= 1
        view[i] = view.get(size, deck[size])
    return drawn
