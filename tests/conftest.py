"""Shared fixtures and helpers."""

from typing import List

import pytest

from preflop_odds.models.card import Card


def cards(text: str) -> List[Card]:
    """Parse a space-separated list like 'As Kd 2c'."""
    return [Card.parse(s) for s in text.split()]


class FixedDraws:
    """Random-integer source that replays a fixed sequence of draws."""

    def __init__(self, draws):
        self._draws = iter(draws)
        self.bounds: List[int] = []

    def __call__(self, bound: int) -> int:
        self.bounds.append(bound)
        return next(self._draws)


@pytest.fixture
def zeros():
    """A source that always draws index 0."""
    return FixedDraws(iter(lambda: 0, None))
