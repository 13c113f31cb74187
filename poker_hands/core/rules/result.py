"""
Generic operation result.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..exceptions import PokerHandsError

T = TypeVar('T')


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a validation step, success value or typed failure.

    Attributes:
        success (bool): whether the operation succeeded.
        data (Optional[T]): the value produced on success.
        message (Optional[str]): human-readable failure message.
        error_code (Optional[str]): machine-readable failure code.
        error (Optional[PokerHandsError]): the failure as an exception.
    """
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error_code: Optional[str] = None
    error: Optional[PokerHandsError] = None

    @staticmethod
    def success_result(data: Optional[T] = None, message: Optional[str] = None) -> 'OperationResult[T]':
        """Build a successful result."""
        return OperationResult(success=True, data=data, message=message)

    @staticmethod
    def failure_result(error: PokerHandsError, error_code: Optional[str] = None) -> 'OperationResult[T]':
        """Build a failed result carrying the error."""
        return OperationResult(success=False, message=str(error),
                               error_code=error_code or type(error).__name__, error=error)

    def is_successful(self) -> bool:
        """Whether the operation succeeded."""
        return self.success

    def unwrap(self) -> T:
        """
        Return the success value or raise the carried error.

        Raises:
            PokerHandsError: the error of a failed result
        """
        if not self.success:
            if self.error is None:
                raise PokerHandsError(self.message or "operation failed without an error")
            raise self.error
        return self.data
