"""Synchronization engine."""

from contentsync.core.engine.cache import DataCache
from contentsync.core.engine.ledger import RelationshipLedger
from contentsync.core.engine.manager import SynchronizationManager
from contentsync.core.engine.mapping import FieldMapper, decode_array, encode_array
from contentsync.core.engine.progress import NullSyncProgress, SyncProgress
from contentsync.core.engine.session import DeltaSession

__all__ = [
    "DataCache",
    "DeltaSession",
    "FieldMapper",
    "NullSyncProgress",
    "RelationshipLedger",
    "SyncProgress",
    "SynchronizationManager",
    "decode_array",
    "encode_array",
]
