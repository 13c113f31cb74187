"""
Unit tests for OperationResult.
"""

import pytest

from poker_hands.core.exceptions import InvalidLineError, PokerHandsError
from poker_hands.core.rules.result import OperationResult


class TestOperationResult:
    """OperationResult tests."""

    def test_success_unwraps_to_data(self):
        result = OperationResult.success_result(["8C"])

        assert result.is_successful()
        assert result.unwrap() == ["8C"]

    def test_failure_carries_error(self):
        error = InvalidLineError("blah")

        result = OperationResult.failure_result(error)

        assert not result.is_successful()
        assert result.error_code == "InvalidLineError"
        assert result.message == str(error)
        with pytest.raises(InvalidLineError):
            result.unwrap()

    def test_failure_without_error_raises_clear_error(self):
        result = OperationResult(success=False, message="no cards")

        with pytest.raises(PokerHandsError, match="no cards"):
            result.unwrap()

    def test_failure_without_error_or_message(self):
        result = OperationResult(success=False)

        with pytest.raises(PokerHandsError, match="without an error"):
            result.unwrap()
