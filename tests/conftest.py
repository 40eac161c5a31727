"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

from listy.sequence import EMPTY, from_iterable, of

LONG_SEQUENCE_SIZE = 100_000


@pytest.fixture
def abcd():
    """The four-character sequence used throughout the scenarios."""
    return of("a", "b", "c", "d")


@pytest.fixture
def long_sequence():
    """Sequence far deeper than the interpreter recursion limit."""
    return from_iterable(range(LONG_SEQUENCE_SIZE))


@pytest.fixture
def empty():
    """The shared empty sequence."""
    return EMPTY


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Temporary configuration directory without a listy.yaml file."""
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


@pytest.fixture
def write_config(config_dir: Path):
    """Write raw YAML text into the temporary listy.yaml."""
    def _write(text: str) -> Path:
        path = config_dir / "listy.yaml"
        path.write_text(text)
        return path
    return _write
