"""
Card parsing module.

Provides the Card type and the rank/suit parsers used by hand evaluation.
"""

from .card import Card, parse_card_tokens, parse_card_value
from .types import Rank, Suit

__all__ = ['Card', 'Rank', 'Suit', 'parse_card_tokens', 'parse_card_value']
