"""
Hand evaluation module.

Provides HandEvaluator, the hand variants and the rank grouping helper.
"""

from .evaluator import HandEvaluator
from .grouping import group_by_count
from .types import (
    Flush,
    FourOfAKind,
    FullHouse,
    Hand,
    HandCategory,
    HighCard,
    OnePair,
    RoyalFlush,
    Straight,
    StraightFlush,
    ThreeOfAKind,
    TwoPairs,
)

__all__ = [
    'HandEvaluator', 'group_by_count',
    'Hand', 'HandCategory',
    'HighCard', 'OnePair', 'TwoPairs', 'ThreeOfAKind', 'Straight',
    'Flush', 'FullHouse', 'FourOfAKind', 'StraightFlush', 'RoyalFlush',
]
