"""
Poker hands - two-player five-card hand evaluation.

Reads rounds of ten card tokens, classifies each player's hand and
counts how many rounds a player wins.
"""

from .application import Player, count_wins, evaluate_round, tokenize

__version__ = "1.0.0"

__all__ = ['Player', 'tokenize', 'evaluate_round', 'count_wins']
