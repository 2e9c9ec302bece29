"""Module: conftest.py

Author: Michael Economou
Date: 2025-05-31

Global pytest configuration and fixtures for the tablestore test suite.
"""

import os
import sys

# Add project root to sys.path so 'tablestore' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from tablestore import FieldDefinition, lexicographic, numeric


class NotificationRecorder:
    """Subscriber double that records every on_change / on_invalidate call."""

    def __init__(self, name: str = "recorder", log: list | None = None):
        self.name = name
        self.log = log if log is not None else []
        self.changes = 0
        self.invalidations = 0

    def on_change(self):
        self.changes += 1
        self.log.append((self.name, "change"))

    def on_invalidate(self):
        self.invalidations += 1
        self.log.append((self.name, "invalidate"))


@pytest.fixture
def recorder():
    """Fixture providing a fresh notification recorder."""
    return NotificationRecorder()


@pytest.fixture
def make_recorder():
    """Fixture providing a factory for recorders that share one call log."""
    shared_log: list = []

    def _make(name: str) -> NotificationRecorder:
        return NotificationRecorder(name, shared_log)

    _make.log = shared_log
    return _make


@pytest.fixture
def sample_records():
    """Fixture providing sample people records."""
    return [
        {"id": "p1", "name": "Carol", "age": 30},
        {"id": "p2", "name": "alice", "age": 25},
        {"id": "p3", "name": "Bob", "age": 41},
    ]


@pytest.fixture
def sample_field_defs():
    """Fixture providing field definitions with a synthetic and a decorated column."""
    return {
        "id": FieldDefinition("ID"),
        "name": FieldDefinition("Name", sort=lexicographic),
        "age": FieldDefinition("Age", decorator=lambda value: f"{value} yrs", sort=numeric),
        "age_next_year": FieldDefinition(
            "Age + 1",
            synthesizer=lambda record: record["age"] + 1,
            sort=numeric,
        ),
    }
