"""Public API surface for contentsync."""

__version__ = "1.0.0"

from contentsync.core.config import load_config, load_model
from contentsync.core.contracts.config import ContentSyncConfig
from contentsync.core.contracts.exceptions import ConfigError, ContentSyncError, DeltaLoadError, StoreError, SyncError
from contentsync.core.contracts.model import PersistenceModel
from contentsync.core.contracts.relationships import ManyLinks, RelationshipTarget, SingleLink
from contentsync.core.contracts.remote import Asset, DeltaDocument, DeltaPage, Entry, Link, Sys
from contentsync.core.contracts.store import (
    AssetPersistable,
    EntryPersistable,
    IdEquals,
    LookupStatus,
    MatchAll,
    Persistable,
    PersistenceStore,
    StoreLookup,
    SyncSpacePersistable,
    predicate_for,
)
from contentsync.core.contracts.sync import ResolutionReport, SyncSummary
from contentsync.core.delta import load_delta
from contentsync.core.engine import (
    DataCache,
    DeltaSession,
    FieldMapper,
    RelationshipLedger,
    SyncProgress,
    SynchronizationManager,
    decode_array,
    encode_array,
)
from contentsync.core.stores import InMemoryStore, JsonSnapshotStore

__all__ = [
    "Asset",
    "AssetPersistable",
    "ConfigError",
    "ContentSyncConfig",
    "ContentSyncError",
    "DataCache",
    "DeltaDocument",
    "DeltaLoadError",
    "DeltaPage",
    "DeltaSession",
    "Entry",
    "EntryPersistable",
    "FieldMapper",
    "IdEquals",
    "InMemoryStore",
    "JsonSnapshotStore",
    "Link",
    "LookupStatus",
    "ManyLinks",
    "MatchAll",
    "Persistable",
    "PersistenceModel",
    "PersistenceStore",
    "RelationshipLedger",
    "RelationshipTarget",
    "ResolutionReport",
    "SingleLink",
    "StoreError",
    "StoreLookup",
    "Sys",
    "SyncError",
    "SyncProgress",
    "SyncSpacePersistable",
    "SyncSummary",
    "SynchronizationManager",
    "__version__",
    "decode_array",
    "encode_array",
    "load_config",
    "load_delta",
    "load_model",
    "predicate_for",
]
