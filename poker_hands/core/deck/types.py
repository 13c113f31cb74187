"""
Card type definitions.

Defines the suit and rank enums used by the card parser.
"""

from enum import Enum, IntEnum
from typing import Dict, List


class Suit(Enum):
    """
    Card suit.

    Suits are compared for equality only (flush detection), never ordered.
    """

    CLUBS = "C"
    DIAMONDS = "D"
    SPADES = "S"
    HEARTS = "H"


class Rank(IntEnum):
    """
    Card rank.

    Aces are always high; there is no low-ace value.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


RANK_SYMBOLS: Dict[str, Rank] = {
    "2": Rank.TWO, "3": Rank.THREE, "4": Rank.FOUR, "5": Rank.FIVE,
    "6": Rank.SIX, "7": Rank.SEVEN, "8": Rank.EIGHT, "9": Rank.NINE,
    "T": Rank.TEN, "J": Rank.JACK, "Q": Rank.QUEEN,
    "K": Rank.KING, "A": Rank.ACE,
}

SUIT_SYMBOLS: Dict[str, Suit] = {suit.value: suit for suit in Suit}

MIN_RANK = int(Rank.TWO)
MAX_RANK = int(Rank.ACE)


def get_all_suits() -> List[Suit]:
    """
    Return every suit.

    Returns:
        List[Suit]: the four suits
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    Return every rank, lowest first.

    Returns:
        List[Rank]: the thirteen ranks
    """
    return list(Rank)
