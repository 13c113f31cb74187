"""
Round evaluation and win tally.

Each line is one round: the first five cards belong to player one, the
last five to player two. Rounds are independent of each other.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence

from ..core.eval.evaluator import HandEvaluator
from ..core.exceptions import InternalConsistencyFault
from .tokenizer import CARDS_PER_LINE, tokenize_or_raise


class Player(Enum):
    """Round participants."""

    PLAYER_ONE = 1
    PLAYER_TWO = 2

    def __str__(self) -> str:
        return f"Player {self.value}"


class RoundService:
    """
    Decides rounds and counts wins.

    Lines are consumed lazily; count_wins stops at the first bad line
    (fail-fast) and propagates its error.
    """

    def __init__(self, evaluator: Optional[HandEvaluator] = None):
        self.logger = logging.getLogger(__name__)
        self.evaluator = evaluator or HandEvaluator()

    def evaluate_round(self, tokens: Sequence[str]) -> Player:
        """
        Decide the winner of one round.

        Args:
            tokens: ten validated, upper-case card tokens

        Returns:
            Player: the player holding the strictly stronger hand

        Raises:
            ValueError: when not given exactly ten tokens
            InternalConsistencyFault: when the two hands are equal
        """
        if len(tokens) != CARDS_PER_LINE:
            raise ValueError(f"a round needs {CARDS_PER_LINE} cards, got: {len(tokens)}")

        hand_one = self.evaluator.create_hand(tokens[:5])
        hand_two = self.evaluator.create_hand(tokens[5:])

        result = self.evaluator.compare_hands(hand_one, hand_two)
        if result == 0:
            raise InternalConsistencyFault(
                f"Two hands should not be tied: {hand_one} vs {hand_two}")

        winner = Player.PLAYER_ONE if result > 0 else Player.PLAYER_TWO
        self.logger.debug("%s vs %s -> %s", hand_one, hand_two, winner)
        return winner

    def winners(self, lines: Iterable[str]) -> Iterator[Player]:
        """
        Lazily decide the winner of each line.

        Raises:
            InvalidLineError: on the first malformed line
            DuplicateCardsError: on the first line dealing a card twice
        """
        for line in lines:
            yield self.evaluate_round(tokenize_or_raise(line))

    def count_wins(self, player: Player, lines: Iterable[str]) -> int:
        """
        Count the rounds won by a player.

        Args:
            player: the player whose wins are counted
            lines: input lines, consumed one at a time

        Returns:
            int: number of rounds won, 0 for no lines

        Raises:
            TypeError: when player is not a Player
            InvalidLineError: on the first malformed line
            DuplicateCardsError: on the first line dealing a card twice
        """
        if not isinstance(player, Player):
            raise TypeError(f"player must be a Player, got: {type(player)}")

        wins = 0
        rounds = 0
        for winner in self.winners(lines):
            rounds += 1
            if winner == player:
                wins += 1

        self.logger.info("%s won %d of %d rounds", player, wins, rounds)
        return wins


def evaluate_round(tokens: Sequence[str]) -> Player:
    """Decide one round with a default RoundService."""
    return RoundService().evaluate_round(tokens)


def count_wins(player: Player, lines: Iterable[str]) -> int:
    """Count a player's wins with a default RoundService."""
    return RoundService().count_wins(player, lines)
