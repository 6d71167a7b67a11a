"""Shared fixtures for the tudu test suite."""

import tempfile
from datetime import date
from pathlib import Path

import pytest

from tudu.storage import TextFileStorage

FIXED_TODAY = date(2023, 6, 15)


def fixed_clock() -> date:
    return FIXED_TODAY


@pytest.fixture
def clock():
    """A clock that always reports 15 June 2023."""
    return fixed_clock


@pytest.fixture
def tasks_dir():
    """Create a temporary task directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def storage(tasks_dir):
    """Create a TextFileStorage backed by the temporary directory."""
    return TextFileStorage(tasks_dir)
