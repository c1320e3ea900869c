"""Shared test fixtures for contentsync tests."""

from __future__ import annotations

import pytest

from contentsync import SynchronizationManager
from tests.fakes.records import MODEL
from tests.fakes.store import FlakyStore


@pytest.fixture
def store() -> FlakyStore:
    """An empty in-memory store with failure injection."""
    return FlakyStore()


@pytest.fixture
def manager(store: FlakyStore) -> SynchronizationManager:
    """A manager over the shared test persistence model."""
    return SynchronizationManager(store, MODEL)
