"""
Hand type definitions.

Defines the hand categories and one immutable variant per category, each
carrying exactly the ranks needed to break ties inside that category.
"""

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import ClassVar, Tuple

from ..deck.types import MAX_RANK, MIN_RANK
from ..exceptions import InternalConsistencyFault


class HandCategory(IntEnum):
    """
    Hand category, higher value is stronger.
    """

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIRS = 3
    THREE_OF_A_KIND = 4
    FLUSH = 5
    STRAIGHT = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


def _check_rank(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"rank must be an int, got: {type(value)}")
    if value < MIN_RANK or value > MAX_RANK:
        raise ValueError(f"invalid rank: {value}")


def _check_ranks(values: Tuple[int, ...], length: int) -> None:
    if not isinstance(values, tuple):
        raise TypeError(f"ranks must be a tuple, got: {type(values)}")
    if len(values) != length:
        raise ValueError(f"expected {length} ranks, got: {len(values)}")
    for value in values:
        _check_rank(value)
    if list(values) != sorted(values, reverse=True):
        raise ValueError(f"ranks must be in descending order: {values}")


@dataclass(frozen=True)
class Hand:
    """
    Base class of every classified five-card hand.

    Hands are totally ordered: first by category, then by the category's
    tie-break key compared lexicographically. Two hands compare equal only
    when they are the same variant with the same payload.

    Examples:
        >>> FourOfAKind(9) > FullHouse(14)
        True
        >>> OnePair(10, (9, 7, 5)) > OnePair(10, (9, 7, 4))
        True
    """

    category: ClassVar[HandCategory]

    def tie_break_key(self) -> Tuple[int, ...]:
        """
        Ranks compared, in order, when both hands share a category.

        Returns:
            Tuple[int, ...]: the payload flattened into a comparison key
        """
        key = []
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, tuple):
                key.extend(value)
            else:
                key.append(value)
        return tuple(key)

    def compare_to(self, other: 'Hand') -> int:
        """
        Compare two hands.

        Args:
            other: the other hand

        Returns:
            int: 1 if this hand is stronger, -1 if weaker, 0 if equal

        Raises:
            TypeError: when other is not a Hand
        """
        if not isinstance(other, Hand):
            raise TypeError(f"other must be a Hand, got: {type(other)}")

        if self.category != other.category:
            return 1 if self.category > other.category else -1

        return _tie_break(self, other)

    def __lt__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        name = self.category.name.replace("_", " ").title()
        key = self.tie_break_key()
        if not key:
            return name
        return f"{name}({', '.join(str(rank) for rank in key)})"


def _tie_break(first: Hand, second: Hand) -> int:
    """
    Compare two hands of the same category by their tie-break keys.

    Raises:
        InternalConsistencyFault: when the hands are of different categories
            or carry payloads of different shapes
    """
    if first.category != second.category or type(first) is not type(second):
        raise InternalConsistencyFault(
            f"Cannot tie-break {first} against {second}: categories differ")

    first_key = first.tie_break_key()
    second_key = second.tie_break_key()
    if len(first_key) != len(second_key):
        raise InternalConsistencyFault(
            f"Cannot tie-break {first} against {second}: payload shapes differ")

    for mine, theirs in zip(first_key, second_key):
        if mine != theirs:
            return 1 if mine > theirs else -1
    return 0


@dataclass(frozen=True, order=False)
class HighCard(Hand):
    """No pair, straight or flush. Ranks sorted descending."""

    category: ClassVar[HandCategory] = HandCategory.HIGH_CARD
    ranks: Tuple[int, ...]

    def __post_init__(self) -> None:
        _check_ranks(self.ranks, 5)


@dataclass(frozen=True, order=False)
class OnePair(Hand):
    """
    A single pair.

    Attributes:
        pair: rank of the pair
        kickers: the three remaining ranks, descending
    """

    category: ClassVar[HandCategory] = HandCategory.ONE_PAIR
    pair: int
    kickers: Tuple[int, ...]

    def __post_init__(self) -> None:
        _check_rank(self.pair)
        _check_ranks(self.kickers, 3)


@dataclass(frozen=True, order=False)
class TwoPairs(Hand):
    """
    Two pairs.

    Attributes:
        high_pair: rank of the higher pair
        low_pair: rank of the lower pair
        kicker: rank of the fifth card
    """

    category: ClassVar[HandCategory] = HandCategory.TWO_PAIRS
    high_pair: int
    low_pair: int
    kicker: int

    def __post_init__(self) -> None:
        for value in (self.high_pair, self.low_pair, self.kicker):
            _check_rank(value)
        if self.high_pair <= self.low_pair:
            raise ValueError(
                f"high pair must outrank low pair: {self.high_pair} <= {self.low_pair}")


@dataclass(frozen=True, order=False)
class ThreeOfAKind(Hand):
    category: ClassVar[HandCategory] = HandCategory.THREE_OF_A_KIND
    rank: int

    def __post_init__(self) -> None:
        _check_rank(self.rank)


@dataclass(frozen=True, order=False)
class Straight(Hand):
    """Five consecutive ranks, not all one suit. Carries the highest rank."""

    category: ClassVar[HandCategory] = HandCategory.STRAIGHT
    rank: int

    def __post_init__(self) -> None:
        _check_rank(self.rank)


@dataclass(frozen=True, order=False)
class Flush(Hand):
    """Five cards of one suit, not consecutive. Ranks sorted descending."""

    category: ClassVar[HandCategory] = HandCategory.FLUSH
    ranks: Tuple[int, ...]

    def __post_init__(self) -> None:
        _check_ranks(self.ranks, 5)


@dataclass(frozen=True, order=False)
class FullHouse(Hand):
    """Three of one rank and a pair. Carries the rank of the three."""

    category: ClassVar[HandCategory] = HandCategory.FULL_HOUSE
    rank: int

    def __post_init__(self) -> None:
        _check_rank(self.rank)


@dataclass(frozen=True, order=False)
class FourOfAKind(Hand):
    category: ClassVar[HandCategory] = HandCategory.FOUR_OF_A_KIND
    rank: int

    def __post_init__(self) -> None:
        _check_rank(self.rank)


@dataclass(frozen=True, order=False)
class StraightFlush(Hand):
    """Five consecutive ranks of one suit, below the royal flush."""

    category: ClassVar[HandCategory] = HandCategory.STRAIGHT_FLUSH
    rank: int

    def __post_init__(self) -> None:
        _check_rank(self.rank)


@dataclass(frozen=True, order=False)
class RoyalFlush(Hand):
    """Ten to ace of one suit. No payload; every royal flush is equal."""

    category: ClassVar[HandCategory] = HandCategory.ROYAL_FLUSH
