"""
Unit tests for round evaluation and the win tally.
"""

import pytest

from poker_hands.application.round_service import (
    Player,
    RoundService,
    count_wins,
    evaluate_round,
)
from poker_hands.application.tokenizer import tokenize_or_raise
from poker_hands.core.exceptions import (
    DuplicateCardsError,
    InternalConsistencyFault,
    InvalidLineError,
)

PLAYER_TWO_HIGH_CARD = "8C TS KC 9H 4S 7D 2S 5D 3S AC"
PLAYER_ONE_TWO_PAIRS = "5C AD 5D AC 9C 7C 5H 8D TD KS"
PLAYER_ONE_ROYAL = "TH JH QH KH AH 2C 2D 2S 2H 3C"
PLAYER_TWO_KICKER = "TC TD 9S 7H 4C TH TS 9C 7D 5S"
TIED = "2C 3D 4S 5H 7C 2D 3S 4H 5C 7D"


class TestEvaluateRound:
    """evaluate_round tests."""

    def setup_method(self):
        self.service = RoundService()

    def test_winners(self):
        test_cases = [
            (PLAYER_TWO_HIGH_CARD, Player.PLAYER_TWO),
            (PLAYER_ONE_TWO_PAIRS, Player.PLAYER_ONE),
            (PLAYER_ONE_ROYAL, Player.PLAYER_ONE),
            (PLAYER_TWO_KICKER, Player.PLAYER_TWO),
        ]

        for line, expected in test_cases:
            assert self.service.evaluate_round(tokenize_or_raise(line)) == expected, line

    def test_first_five_cards_belong_to_player_one(self):
        tokens = tokenize_or_raise(PLAYER_ONE_ROYAL)
        swapped = tokens[5:] + tokens[:5]

        assert self.service.evaluate_round(swapped) == Player.PLAYER_TWO

    def test_tie_is_a_fault(self):
        with pytest.raises(InternalConsistencyFault):
            self.service.evaluate_round(tokenize_or_raise(TIED))

    def test_wrong_token_count(self):
        with pytest.raises(ValueError):
            self.service.evaluate_round(["2C", "3D"])

    def test_module_function(self):
        assert evaluate_round(tokenize_or_raise(PLAYER_ONE_ROYAL)) == Player.PLAYER_ONE


class TestCountWins:
    """count_wins tests."""

    def setup_method(self):
        self.service = RoundService()
        self.lines = [
            PLAYER_TWO_HIGH_CARD,
            PLAYER_ONE_TWO_PAIRS,
            PLAYER_ONE_ROYAL,
            PLAYER_TWO_KICKER,
            "8c ts kc 9h 4s 7d 2s 5d 3s ac",
        ]

    def test_counts_each_player(self):
        assert self.service.count_wins(Player.PLAYER_ONE, self.lines) == 2
        assert self.service.count_wins(Player.PLAYER_TWO, self.lines) == 3

    def test_empty_input(self):
        assert self.service.count_wins(Player.PLAYER_ONE, []) == 0
        assert count_wins(Player.PLAYER_TWO, iter([])) == 0

    def test_accepts_generators(self):
        lines = (line for line in self.lines)

        assert count_wins(Player.PLAYER_ONE, lines) == 2

    def test_fails_fast_on_invalid_line(self):
        consumed = []

        def lines():
            for line in [PLAYER_ONE_ROYAL, "blah", PLAYER_ONE_TWO_PAIRS]:
                consumed.append(line)
                yield line

        with pytest.raises(InvalidLineError):
            self.service.count_wins(Player.PLAYER_ONE, lines())
        assert consumed == [PLAYER_ONE_ROYAL, "blah"]

    def test_fails_on_duplicate_cards(self):
        with pytest.raises(DuplicateCardsError):
            self.service.count_wins(Player.PLAYER_ONE, ["8C 8C KC 9H 4S 7D 2S 5D 3S AC"])

    def test_rejects_non_player(self):
        with pytest.raises(TypeError):
            self.service.count_wins(1, self.lines)

    def test_winners_is_lazy(self):
        winners = self.service.winners(iter(self.lines))

        assert next(winners) == Player.PLAYER_TWO
        assert next(winners) == Player.PLAYER_ONE

    def test_player_string(self):
        assert str(Player.PLAYER_ONE) == "Player 1"
        assert str(Player.PLAYER_TWO) == "Player 2"
