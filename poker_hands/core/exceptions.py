"""
Poker hands error definitions.

Validation errors (bad lines, bad input files) are recoverable and are
surfaced to the caller. InternalConsistencyFault marks a broken invariant
in classification or comparison and is never caught by the library.
"""

from typing import Optional


class PokerHandsError(Exception):
    """Base class for all poker hands errors."""
    pass


class InvalidCardValueError(PokerHandsError):
    """A rank symbol outside 2-9, T, J, Q, K, A."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid value {value!r}")


class LineError(PokerHandsError):
    """An input line that cannot be evaluated as a round."""

    reason = "Invalid line"

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"{self.reason}: {line!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineError):
            return NotImplemented
        return type(self) is type(other) and self.line == other.line

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.line))


class InvalidLineError(LineError):
    """The line does not match the ten-card token grammar."""

    reason = "Invalid line"


class DuplicateCardsError(LineError):
    """The line is well formed but deals the same card twice."""

    reason = "Duplicate cards"


class InternalConsistencyFault(PokerHandsError):
    """An unreachable classification or comparison state was reached."""
    pass


class InputFileError(PokerHandsError):
    """Base class for input file argument errors."""

    def __init__(self, message: str, file_name: Optional[str] = None):
        self.file_name = file_name
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputFileError):
            return NotImplemented
        return type(self) is type(other) and self.file_name == other.file_name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.file_name))


class MissingFileArgumentError(InputFileError):
    """No input file name was given."""

    def __init__(self):
        super().__init__("Missing input file name parameter.")


class TooManyArgumentsError(InputFileError):
    """More than one input file name was given."""

    def __init__(self):
        super().__init__("Too many arguments, expected a single input file name.")


class InputFileNotFoundError(InputFileError):
    """The named input file does not exist."""

    def __init__(self, file_name: str):
        super().__init__(f"The file '{file_name}' does not exist", file_name)


class ConfigError(PokerHandsError):
    """Invalid configuration value."""
    pass
