"""
Input file handling.

Validates the command-line file argument and reads rounds lazily.
"""

import logging
from pathlib import Path
from typing import Iterator, Sequence, Union

from ..core.exceptions import (
    InputFileNotFoundError,
    MissingFileArgumentError,
    TooManyArgumentsError,
)
from ..core.rules.result import OperationResult

logger = logging.getLogger(__name__)


def validate_input_file(args: Sequence[str]) -> OperationResult[str]:
    """
    Check that exactly one existing file was named.

    Args:
        args: positional command-line arguments

    Returns:
        OperationResult[str]: the file name, or a failure with error_code
            "MissingFileArgument", "TooManyArguments" or "FileNotFound"
    """
    if not args:
        return OperationResult.failure_result(MissingFileArgumentError(), "MissingFileArgument")
    if len(args) > 1:
        return OperationResult.failure_result(TooManyArgumentsError(), "TooManyArguments")

    file_name = args[0]
    if not Path(file_name).is_file():
        return OperationResult.failure_result(InputFileNotFoundError(file_name), "FileNotFound")

    return OperationResult.success_result(file_name)


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """
    Yield the lines of a file without their line endings.

    The file is opened on first iteration and closed when the generator is
    exhausted or closed.

    Args:
        path: file to read

    Yields:
        str: one line per round
    """
    logger.debug("Reading rounds from %s", path)
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\r\n")
