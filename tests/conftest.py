"""
Test configuration - pytest fixtures and markers shared by all tests.
"""

import logging
from typing import List

import pytest


@pytest.fixture
def restore_root_logger():
    """Put back root logger handlers and level changed by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def rounds_file(tmp_path):
    """Write lines to a temporary rounds file and return its path."""
    def _write(lines: List[str]) -> str:
        path = tmp_path / "rounds.txt"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)
    return _write


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "property_test: property-based tests"
    )
    config.addinivalue_line(
        "markers", "integration: end-to-end tests through the CLI"
    )
