"""Tests for the deck model."""

import pytest

from preflop_odds.errors import InvariantViolation
from preflop_odds.models.card import Card, Rank, Suit
from preflop_odds.simulation.deck import full_deck, remove_cards

from conftest import cards


class TestFullDeck:
    """Tests for the canonical deck."""

    def test_has_52_unique_cards(self):
        deck = full_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_canonical_order(self):
        """Spades first, aces high to deuces, diamonds last."""
        deck = full_deck()
        assert deck[0] == Card(Rank.ACE, Suit.SPADES)
        assert deck[12] == Card(Rank.TWO, Suit.SPADES)
        assert deck[13] == Card(Rank.ACE, Suit.HEARTS)
        assert deck[51] == Card(Rank.TWO, Suit.DIAMONDS)

    def test_same_deck_every_call(self):
        assert full_deck() == full_deck()


class TestRemoveCards:
    """Tests for removing known cards from a deck."""

    def test_remove_hole_cards(self):
        hole = cards("As Kh")
        remaining = remove_cards(full_deck(), hole)
        assert len(remaining) == 50
        assert not set(hole) & set(remaining)

    def test_preserves_order(self):
        deck = cards("As Ks Qs Js Ts")
        assert remove_cards(deck, cards("Ks Js")) == tuple(cards("As Qs Ts"))

    def test_does_not_mutate_input(self):
        deck = cards("As Ks Qs")
        remove_cards(deck, cards("Ks"))
        assert deck == cards("As Ks Qs")

    def test_remove_nothing(self):
        assert remove_cards(full_deck(), []) == full_deck()

    def test_card_not_in_deck(self):
        """Removing a card that is not there is a catalog error."""
        with pytest.raises(InvariantViolation):
            remove_cards(cards("As Ks Qs"), cards("2d"))

    def test_duplicate_excluded_card(self):
        with pytest.raises(InvariantViolation):
            remove_cards(full_deck(), cards("As As"))
