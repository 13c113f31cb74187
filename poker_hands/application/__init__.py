"""
Poker hands application layer.

Orchestrates the core: line tokenization, round evaluation, win tally,
input file handling and configuration.
"""

from .config_service import AppConfig, ConfigService, LoggingConfig, TallyConfig
from .input_service import read_lines, validate_input_file
from .round_service import Player, RoundService, count_wins, evaluate_round
from .tokenizer import tokenize, tokenize_or_raise

__all__ = [
    'tokenize', 'tokenize_or_raise',
    'Player', 'RoundService', 'evaluate_round', 'count_wins',
    'validate_input_file', 'read_lines',
    'AppConfig', 'ConfigService', 'LoggingConfig', 'TallyConfig',
]
