"""
Card parsing.

Turns two-character card tokens such as "TS" into numeric ranks and suits.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..exceptions import InvalidCardValueError
from .types import RANK_SYMBOLS, SUIT_SYMBOLS, Rank, Suit


def parse_card_value(symbol: str) -> int:
    """
    Convert a rank symbol to its numeric rank.

    Args:
        symbol: one of 2-9, T, J, Q, K, A

    Returns:
        int: rank in [2, 14]

    Raises:
        InvalidCardValueError: when the symbol is not a rank symbol

    Examples:
        >>> parse_card_value("T")
        10
        >>> parse_card_value("A")
        14
    """
    rank = RANK_SYMBOLS.get(symbol)
    if rank is None:
        raise InvalidCardValueError(symbol)
    return int(rank)


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Attributes:
        rank: card rank
        suit: card suit

    Examples:
        >>> card = Card.from_token("AH")
        >>> card.rank.value
        14
        >>> str(card)
        'AH'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        Validate field types.

        Raises:
            TypeError: when rank or suit has the wrong type
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got: {type(self.suit)}")

    def __str__(self) -> str:
        symbol = next(s for s, r in RANK_SYMBOLS.items() if r == self.rank)
        return f"{symbol}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_token(cls, token: str) -> 'Card':
        """
        Build a card from a validated upper-case token.

        Args:
            token: two characters, rank symbol then suit symbol, e.g. "TS"

        Returns:
            Card: the parsed card

        Raises:
            TypeError: when token is not a string
            ValueError: when the token is not two characters or the suit is unknown
            InvalidCardValueError: when the rank symbol is unknown
        """
        if not isinstance(token, str):
            raise TypeError(f"token must be a string, got: {type(token)}")
        if len(token) != 2:
            raise ValueError(f"card token must be two characters: {token!r}")

        rank = Rank(parse_card_value(token[0]))
        suit = SUIT_SYMBOLS.get(token[1])
        if suit is None:
            raise ValueError(f"invalid suit: {token[1]!r}")
        return cls(rank, suit)


def parse_card_tokens(tokens: Sequence[str]) -> Tuple[List[int], List[str]]:
    """
    Split card tokens into parallel rank and suit lists.

    Suits stay as their raw characters; they are only compared for equality.

    Args:
        tokens: validated card tokens

    Returns:
        Tuple[List[int], List[str]]: (ranks, suit characters), in token order
    """
    values = [parse_card_value(token[0]) for token in tokens]
    suits = [token[1] for token in tokens]
    return values, suits
