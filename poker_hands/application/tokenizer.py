"""
Line tokenizer.

Validates one input line against the ten-card grammar and returns its
upper-cased card tokens.
"""

import logging
import re
from typing import List

from ..core.deck.card import Card
from ..core.exceptions import DuplicateCardsError, InvalidLineError
from ..core.rules.result import OperationResult

logger = logging.getLogger(__name__)

CARDS_PER_LINE = 10

INVALID_LINE = "InvalidLine"
DUPLICATE_CARDS = "DuplicateCards"

_CARD_TOKEN = re.compile(r"[2-9TJQKA][CDSH]", re.IGNORECASE | re.ASCII)


def tokenize(line: str) -> OperationResult[List[str]]:
    """
    Split a line into ten validated card tokens.

    Tokens may be separated by any amount of whitespace and may use either
    case; the returned tokens are upper case.

    Args:
        line: raw input line

    Returns:
        OperationResult[List[str]]: the ten tokens, or a failure with
            error_code "InvalidLine" or "DuplicateCards"

    Raises:
        TypeError: when line is not a string

    Examples:
        >>> tokenize("8c ts kc 9h 4s 7d 2s 5d 3s ac").data[:3]
        ['8C', 'TS', 'KC']
    """
    if not isinstance(line, str):
        raise TypeError(f"line must be a string, got: {type(line)}")

    tokens = line.split()
    if len(tokens) != CARDS_PER_LINE or not all(_CARD_TOKEN.fullmatch(t) for t in tokens):
        logger.warning("Rejected invalid line: %r", line)
        return OperationResult.failure_result(InvalidLineError(line), INVALID_LINE)

    tokens = [token.upper() for token in tokens]
    if len({Card.from_token(token) for token in tokens}) != CARDS_PER_LINE:
        logger.warning("Rejected line with duplicate cards: %r", line)
        return OperationResult.failure_result(DuplicateCardsError(line), DUPLICATE_CARDS)

    return OperationResult.success_result(tokens)


def tokenize_or_raise(line: str) -> List[str]:
    """
    Tokenize a line, raising on failure.

    Raises:
        InvalidLineError: when the line does not match the grammar
        DuplicateCardsError: when a card appears twice
    """
    return tokenize(line).unwrap()
