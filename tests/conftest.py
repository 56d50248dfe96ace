"""
Pytest configuration and shared fixtures for safecoll tests.
"""

from dataclasses import dataclass

import pytest


@dataclass
class Record:
    """Small value object compared by value, never by identity."""

    id: int
    name: str


@pytest.fixture
def record_factory():
    """Factory fixture for creating records."""

    def _create_record(id: int, name: str) -> Record:
        return Record(id, name)

    return _create_record


@pytest.fixture
def equal_records(record_factory):
    """Two records that are equal but distinct instances."""
    return record_factory(1, "a"), record_factory(1, "a")
