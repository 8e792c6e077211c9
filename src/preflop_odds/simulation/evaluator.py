"""Hand evaluation for 5 to 7 card hands."""

from enum import IntEnum
from typing import Dict, List, NamedTuple, Sequence, Tuple

from preflop_odds.errors import InvalidArgument
from preflop_odds.models.card import Card, Suit

# Tie-break keys are packed base 15, most significant first.
_KEY_BASE = 15
_KEY_SLOTS = 5


class HandRank(IntEnum):
    """Hand rankings from worst to best."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


class HandValue(NamedTuple):
    """Comparable hand strength: category first, then rank within it."""
    category: HandRank
    rank: int


class HandEvaluator:
    """Evaluates poker hands."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> HandValue:
        """Evaluate the best five-card hand among 5 to 7 cards.

        Returns:
            HandValue whose tuple order is the poker order of the hands.
        """
        if not 5 <= len(cards) <= 7:
            raise InvalidArgument(f"Can only evaluate 5 to 7 cards, got {len(cards)}")

        category, keys = HandEvaluator._classify(cards)
        return HandValue(category, HandEvaluator._pack(keys))

    @staticmethod
    def _pack(keys: List[int]) -> int:
        packed = 0
        for i in range(_KEY_SLOTS):
            packed = packed * _KEY_BASE + (keys[i] if i < len(keys) else 0)
        return packed

    @staticmethod
    def _classify(cards: Sequence[Card]) -> Tuple[HandRank, List[int]]:
        ranks = sorted((c.rank.numeric_value for c in cards), reverse=True)

        by_suit: Dict[Suit, List[int]] = {}
        for c in cards:
            by_suit.setdefault(c.suit, []).append(c.rank.numeric_value)
        flush_ranks: List[int] = []
        for suited in by_suit.values():
            if len(suited) >= 5:
                flush_ranks = sorted(suited, reverse=True)

        # Straight Flush / Royal Flush
        if flush_ranks:
            is_straight, high_card = HandEvaluator._check_straight(flush_ranks)
            if is_straight:
                if high_card == 14:
                    return HandRank.ROYAL_FLUSH, [14]
                return HandRank.STRAIGHT_FLUSH, [high_card]

        rank_counts: Dict[int, int] = {}
        for r in ranks:
            rank_counts[r] = rank_counts.get(r, 0) + 1
        quads = sorted((r for r, n in rank_counts.items() if n == 4), reverse=True)
        trips = sorted((r for r, n in rank_counts.items() if n == 3), reverse=True)
        pairs = sorted((r for r, n in rank_counts.items() if n == 2), reverse=True)

        # Four of a Kind
        if quads:
            kicker = max(r for r in ranks if r != quads[0])
            return HandRank.FOUR_OF_A_KIND, [quads[0], kicker]

        # Full House; a second set of trips plays as the pair
        if trips and (len(trips) > 1 or pairs):
            pair_rank = max(trips[1:] + pairs)
            return HandRank.FULL_HOUSE, [trips[0], pair_rank]

        # Flush
        if flush_ranks:
            return HandRank.FLUSH, flush_ranks[:5]

        # Straight
        is_straight, high_card = HandEvaluator._check_straight(ranks)
        if is_straight:
            return HandRank.STRAIGHT, [high_card]

        # Three of a Kind
        if trips:
            kickers = [r for r in ranks if r != trips[0]][:2]
            return HandRank.THREE_OF_A_KIND, [trips[0]] + kickers

        # Two Pair
        if len(pairs) >= 2:
            high_pair, low_pair = pairs[0], pairs[1]
            kicker = max(r for r in ranks if r not in (high_pair, low_pair))
            return HandRank.TWO_PAIR, [high_pair, low_pair, kicker]

        # One Pair
        if pairs:
            kickers = [r for r in ranks if r != pairs[0]][:3]
            return HandRank.ONE_PAIR, [pairs[0]] + kickers

        # High Card
        return HandRank.HIGH_CARD, ranks[:5]

    @staticmethod
    def _check_straight(ranks: List[int]) -> Tuple[bool, int]:
        """Check if ranks contain a straight.

        Returns:
            Tuple of (is_straight, high_card).
        """
        unique_ranks = sorted(set(ranks), reverse=True)

        if len(unique_ranks) >= 5:
            for i in range(len(unique_ranks) - 4):
                if unique_ranks[i] - unique_ranks[i + 4] == 4:
                    return True, unique_ranks[i]

        # Ace-low straight (A-2-3-4-5)
        if {14, 2, 3, 4, 5}.issubset(unique_ranks):
            return True, 5

        return False, 0
