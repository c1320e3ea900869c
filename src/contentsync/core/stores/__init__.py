"""Persistence store implementations."""

from contentsync.core.stores.memory import InMemoryStore, StoreOperation
from contentsync.core.stores.snapshot import JsonSnapshotStore

__all__ = ["InMemoryStore", "JsonSnapshotStore", "StoreOperation"]
