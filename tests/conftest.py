"""
Pytest configuration and fixtures.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture
def example_ini_path() -> Path:
    """Path to the example INI file shipped with the project."""
    return Path(__file__).parent.parent / "example.ini"


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing INI content to a temporary file."""

    def _write(content: str | bytes, name: str = "test.ini") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Remove handlers installed by setup_logging() after each test."""
    yield
    logger = logging.getLogger("tinyini")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
