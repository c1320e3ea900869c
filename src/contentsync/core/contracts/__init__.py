"""Core contracts-domain exports."""

from contentsync.core.contracts.config import ContentSyncConfig
from contentsync.core.contracts.exceptions import ConfigError, ContentSyncError, DeltaLoadError, StoreError, SyncError
from contentsync.core.contracts.model import PersistenceModel
from contentsync.core.contracts.relationships import ManyLinks, PendingRelationships, RelationshipTarget, SingleLink
from contentsync.core.contracts.remote import Asset, DeltaDocument, DeltaPage, Entry, Link, Sys
from contentsync.core.contracts.store import (
    AssetPersistable,
    EntryPersistable,
    IdEquals,
    LookupStatus,
    MatchAll,
    Persistable,
    PersistenceStore,
    Predicate,
    StoreLookup,
    SyncSpacePersistable,
    predicate_for,
)
from contentsync.core.contracts.sync import ResolutionReport, SyncSummary

__all__ = [
    "Asset",
    "AssetPersistable",
    "ConfigError",
    "ContentSyncConfig",
    "ContentSyncError",
    "DeltaDocument",
    "DeltaLoadError",
    "DeltaPage",
    "Entry",
    "EntryPersistable",
    "IdEquals",
    "Link",
    "LookupStatus",
    "ManyLinks",
    "MatchAll",
    "PendingRelationships",
    "Persistable",
    "PersistenceModel",
    "PersistenceStore",
    "Predicate",
    "RelationshipTarget",
    "ResolutionReport",
    "SingleLink",
    "StoreError",
    "StoreLookup",
    "Sys",
    "SyncError",
    "SyncSpacePersistable",
    "SyncSummary",
    "predicate_for",
]
