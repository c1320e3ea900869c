"""Synchronization manager reconciling delta events into a persistence store."""

from __future__ import annotations

import logging
from importlib import metadata
from typing import Any

from contentsync.core.contracts.exceptions import StoreError, SyncError
from contentsync.core.contracts.model import PersistenceModel
from contentsync.core.contracts.relationships import ManyLinks, PendingRelationships, RelationshipTarget, SingleLink
from contentsync.core.contracts.remote import Asset, Entry, Link
from contentsync.core.contracts.store import (
    AssetPersistable,
    EntryPersistable,
    LookupStatus,
    MatchAll,
    PersistenceStore,
    Predicate,
    RecordT,
    StoreLookup,
    SyncSpacePersistable,
    predicate_for,
)
from contentsync.core.contracts.sync import ResolutionReport
from contentsync.core.engine.cache import DataCache
from contentsync.core.engine.ledger import RelationshipLedger
from contentsync.core.engine.mapping import FieldMapper

logger = logging.getLogger(__name__)


def _relationship_target(field_name: str, value: Any) -> RelationshipTarget | None:
    if isinstance(value, Link):
        return SingleLink(id=value.id, link_type=value.link_type)
    if isinstance(value, list):
        links = [item for item in value if isinstance(item, Link)]
        if len(links) != len(value):
            logger.warning("Ignoring %d non-link values in relationship field %r", len(value) - len(links), field_name)
        link_types = {link.link_type for link in links}
        return ManyLinks(
            ids=tuple(link.id for link in links),
            link_type=link_types.pop() if len(link_types) == 1 else None,
        )
    if value is not None:
        logger.warning("Relationship field %r holds a non-link value; ignoring it", field_name)
    return None


class SynchronizationManager:
    """Applies asset/entry creations and deletions to a store and links entries afterwards.

    Ingestion is two-phase: :meth:`create_entry` upserts the record and records
    its outgoing links in a ledger; :meth:`resolve_relationships`, called once a
    batch has been ingested, assigns the linked records. Forward references
    inside a batch therefore resolve regardless of arrival order.

    Calls must be serialized by the host: one coordinating flow per store.

    Args:
        store: Persistence store receiving the records.
        model: Local record types for assets, entries and the sync cursor.
    """

    name = "contentsync"

    def __init__(self, store: PersistenceStore, model: PersistenceModel) -> None:
        self._store = store
        self._model = model
        self._ledger = RelationshipLedger()
        self._mapper = FieldMapper(store, model.entry_types)

    @property
    def version(self) -> str:
        try:
            return metadata.version("contentsync")
        except metadata.PackageNotFoundError:
            return "unknown"

    @property
    def store(self) -> PersistenceStore:
        return self._store

    @property
    def mapper(self) -> FieldMapper:
        return self._mapper

    @property
    def pending_relationships(self) -> int:
        """Number of entries with links waiting for :meth:`resolve_relationships`."""
        return len(self._ledger)

    # ------------------------------------------------------------------
    # Store adapters
    # ------------------------------------------------------------------

    def _lookup(self, type: type[RecordT], predicate: Predicate) -> StoreLookup:
        try:
            return StoreLookup.of(self._store.fetch_all(type, predicate))
        except StoreError as exc:
            logger.warning("Fetching %s records failed, treating as no match: %s", type.__name__, exc)
            return StoreLookup.failed(exc)

    def _create(self, type: type[RecordT]) -> RecordT:
        try:
            return self._store.create(type)
        except StoreError as exc:
            raise SyncError(f"failed to create {type.__name__} record") from exc

    def _upsert(self, type: type[RecordT], record_id: str) -> RecordT:
        lookup = self._lookup(type, predicate_for(record_id))
        if lookup.status is LookupStatus.FOUND:
            return lookup.first
        record = self._create(type)
        record.id = record_id
        logger.debug("Created %s %s", type.__name__, record_id)
        return record

    def _delete(self, type: type[RecordT], record_id: str) -> int:
        try:
            return self._store.delete(type, predicate_for(record_id))
        except StoreError as exc:
            logger.warning("Deleting %s %s failed, ignoring: %s", type.__name__, record_id, exc)
            return 0

    # ------------------------------------------------------------------
    # Ingestion callbacks
    # ------------------------------------------------------------------

    def create_asset(self, asset: Asset) -> AssetPersistable:
        """Upsert the local asset record; the remote values always win."""
        record = self._upsert(self._model.asset_type, asset.id)
        record.title = asset.title
        record.asset_description = asset.description
        record.url_string = asset.url
        record.created_at = asset.sys.created_at
        record.updated_at = asset.sys.updated_at
        return record

    def create_entry(self, entry: Entry) -> EntryPersistable | None:
        """Upsert the local entry record and record its links for later resolution.

        Returns:
            The local record, or ``None`` when the entry's content type is not
            part of the persistence model.
        """
        entry_type = self._model.entry_type_for(entry.content_type_id)
        if entry_type is None:
            logger.debug("Skipping entry %s of unmodelled content type %s", entry.id, entry.content_type_id)
            return None

        record = self._upsert(entry_type, entry.id)
        record.created_at = entry.sys.created_at
        record.updated_at = entry.sys.updated_at

        self._mapper.apply(record, entry_type, entry.fields)
        self._ledger.record(entry.id, self._extract_relationships(entry_type, entry))
        return record

    def _extract_relationships(self, entry_type: type[EntryPersistable], entry: Entry) -> PendingRelationships:
        try:
            relationship_names = self._store.relationships(entry_type)
        except StoreError as exc:
            logger.warning("Cannot list relationships of %s: %s", entry_type.__name__, exc)
            return {}

        relationships: PendingRelationships = {}
        for name in relationship_names:
            if name not in entry.fields:
                continue
            target = _relationship_target(name, entry.fields[name])
            if target is not None:
                relationships[name] = target
        return relationships

    def delete_asset(self, asset_id: str) -> int:
        return self._delete(self._model.asset_type, asset_id)

    def delete_entry(self, entry_id: str) -> int:
        """Delete the entry from whichever configured entry type holds it."""
        return sum(self._delete(entry_type, entry_id) for entry_type in self._model.entry_types)

    # ------------------------------------------------------------------
    # Relationship resolution
    # ------------------------------------------------------------------

    def resolve_relationships(self) -> ResolutionReport:
        """Link every recorded relationship against the records currently in the store.

        The ledger is emptied whatever the outcome; unresolved targets are not
        retried unless their entry is ingested again.
        """
        pending = self._ledger.drain()
        report = ResolutionReport()
        if not pending:
            return report

        cache = DataCache(self._store, self._model.asset_type, self._model.entry_types)
        logger.debug("Resolving relationships of %d entries against %d records", len(pending), len(cache))

        for entry_id, relationships in pending.items():
            record = cache.entry(entry_id)
            if record is None:
                logger.debug("Entry %s is not materialized; dropping its relationships", entry_id)
                report.entries_missing += 1
                continue

            entry_type = type(record)
            for field_name, target in relationships.items():
                assign = self._mapper.setter(entry_type, field_name)
                if assign is None:
                    logger.warning("%s has no relationship %r", entry_type.__name__, field_name)
                    continue
                if isinstance(target, SingleLink):
                    resolved = cache.item(target.id, target.link_type)
                    assign(record, resolved)
                    if resolved is None:
                        report.links_dangling += 1
                    else:
                        report.links_resolved += 1
                else:
                    targets = [cache.item(target_id, target.link_type) for target_id in target.ids]
                    found = [item for item in targets if item is not None]
                    assign(record, found)
                    report.links_resolved += len(found)
                    report.links_dangling += len(targets) - len(found)
            report.entries_resolved += 1

        if report.links_dangling:
            logger.info("%d relationship targets could not be resolved", report.links_dangling)
        return report

    # ------------------------------------------------------------------
    # Sync cursor
    # ------------------------------------------------------------------

    def fetch_space(self) -> SyncSpacePersistable:
        """Return the singleton sync cursor, creating it when the store holds none."""
        space_type = self._model.space_type
        lookup = self._lookup(space_type, MatchAll())
        if lookup.status is not LookupStatus.FOUND:
            return self._create(space_type)
        if len(lookup.records) > 1:
            logger.warning("Store holds %d %s records; using the first", len(lookup.records), space_type.__name__)
        return lookup.first

    @property
    def sync_token(self) -> str | None:
        return self.fetch_space().sync_token

    def update_sync_token(self, sync_token: str) -> None:
        """Store *sync_token* on the cursor and persist it."""
        space = self.fetch_space()
        space.sync_token = sync_token
        self.save()

    def save(self) -> None:
        try:
            self._store.save()
        except StoreError as exc:
            raise SyncError("failed to save persistence store") from exc
