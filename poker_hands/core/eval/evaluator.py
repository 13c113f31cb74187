"""
Five-card hand evaluator.

Classification runs in two passes: rank multiplicities first, then, only
when no two cards share a rank, straight and flush detection.
"""

from typing import Hashable, List, Sequence

from ..deck.card import parse_card_tokens
from ..deck.types import Rank
from ..exceptions import InternalConsistencyFault
from .grouping import group_by_count
from .types import (
    Flush,
    FourOfAKind,
    FullHouse,
    Hand,
    HighCard,
    OnePair,
    RoyalFlush,
    Straight,
    StraightFlush,
    ThreeOfAKind,
    TwoPairs,
)

HAND_SIZE = 5

ROYAL_RANKS = [Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN]


class HandEvaluator:
    """
    Five-card hand evaluator.

    Examples:
        >>> evaluator = HandEvaluator()
        >>> evaluator.create_hand(["TH", "JH", "QH", "KH", "AH"])
        RoyalFlush()
        >>> evaluator.create_hand(["9C", "9D", "9S", "5H", "5C"])
        FullHouse(rank=9)
    """

    def create_hand(self, card_tokens: Sequence[str]) -> Hand:
        """
        Classify five validated card tokens.

        Args:
            card_tokens: five upper-case tokens such as "TS"

        Returns:
            Hand: the classified hand

        Raises:
            ValueError: when not given exactly five tokens
            InvalidCardValueError: when a rank symbol is unknown
            InternalConsistencyFault: when the ranks form no valid hand
        """
        if len(card_tokens) != HAND_SIZE:
            raise ValueError(f"a hand needs {HAND_SIZE} cards, got: {len(card_tokens)}")

        values, suits = parse_card_tokens(card_tokens)
        hand = self.evaluate_multiples(values)
        if isinstance(hand, HighCard):
            return self.evaluate_sequence_and_suits(values, suits)
        return hand

    def evaluate_multiples(self, values: Sequence[int]) -> Hand:
        """
        Classify a hand by how often its ranks repeat.

        A HighCard result is tentative: straights and flushes are only
        detected by evaluate_sequence_and_suits.

        Args:
            values: the five ranks

        Returns:
            Hand: FourOfAKind, FullHouse, ThreeOfAKind, TwoPairs, OnePair
                or HighCard

        Raises:
            InternalConsistencyFault: when the grouping matches no hand shape
        """
        groups = group_by_count(values)
        if any(count < 1 or count > 4 for count in groups):
            raise InternalConsistencyFault(f"Invalid hand configuration: {list(values)}")

        four = groups.get(4)
        three = groups.get(3)
        pairs = groups.get(2, [])
        ones = groups.get(1, [])

        if four:
            return FourOfAKind(four[0])

        if three:
            if not pairs:
                return ThreeOfAKind(three[0])
            if len(pairs) == 1:
                return FullHouse(three[0])
            raise InternalConsistencyFault(f"Invalid hand configuration: {list(values)}")

        if len(pairs) == 1:
            return OnePair(pairs[0], tuple(sorted(ones, reverse=True)))

        if len(pairs) == 2:
            # Bucket order follows first encounter, not rank.
            if len(ones) != 1:
                raise InternalConsistencyFault(f"Invalid hand configuration: {list(values)}")
            return TwoPairs(max(pairs), min(pairs), ones[0])

        if not pairs and len(ones) == HAND_SIZE:
            return HighCard(tuple(sorted(ones, reverse=True)))

        raise InternalConsistencyFault(f"Invalid hand configuration: {list(values)}")

    def evaluate_sequence_and_suits(self, values: Sequence[int],
                                    suits: Sequence[Hashable]) -> Hand:
        """
        Classify five distinct ranks as straight, flush or high card.

        The ace only counts high, so A-2-3-4-5 is not a straight.

        Args:
            values: the five ranks, all distinct
            suits: the five suits, compared for equality only

        Returns:
            Hand: RoyalFlush, StraightFlush, Straight, Flush or HighCard
        """
        is_flush = len(set(suits)) == 1

        sorted_values = sorted(values, reverse=True)
        is_straight = self._is_straight(sorted_values)

        if is_flush and is_straight:
            if sorted_values == ROYAL_RANKS:
                return RoyalFlush()
            return StraightFlush(sorted_values[0])
        if is_straight:
            return Straight(sorted_values[0])
        if is_flush:
            return Flush(tuple(sorted_values))
        return HighCard(tuple(sorted_values))

    def compare_hands(self, hand1: Hand, hand2: Hand) -> int:
        """
        Compare two classified hands.

        Args:
            hand1: first hand
            hand2: second hand

        Returns:
            int: 1 if hand1 is stronger, -1 if hand2 is stronger, 0 if equal

        Raises:
            TypeError: when either argument is not a Hand
        """
        if not isinstance(hand1, Hand):
            raise TypeError(f"hand1 must be a Hand, got: {type(hand1)}")
        if not isinstance(hand2, Hand):
            raise TypeError(f"hand2 must be a Hand, got: {type(hand2)}")

        return hand1.compare_to(hand2)

    def _is_straight(self, sorted_values: List[int]) -> bool:
        """Five ranks, descending by exactly one each step."""
        if len(sorted_values) != HAND_SIZE:
            return False
        top = sorted_values[0]
        return all(value == top - i for i, value in enumerate(sorted_values))
