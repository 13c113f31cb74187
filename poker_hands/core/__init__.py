"""
Poker hands core module - pure domain logic.

Core modules depend only on other core modules, never on the application
or UI layers.

Modules:
    deck: card tokens, ranks and suits
    eval: hand classification and comparison
    rules: shared result type
    exceptions: error taxonomy
"""

from .exceptions import (
    DuplicateCardsError,
    InternalConsistencyFault,
    InvalidCardValueError,
    InvalidLineError,
    PokerHandsError,
)

__all__ = [
    'PokerHandsError',
    'InvalidCardValueError',
    'InvalidLineError',
    'DuplicateCardsError',
    'InternalConsistencyFault',
]
