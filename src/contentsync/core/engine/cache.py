"""Per-pass lookup cache over materialized local records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from contentsync.core.contracts.exceptions import StoreError
from contentsync.core.contracts.remote import LinkType
from contentsync.core.contracts.store import (
    AssetPersistable,
    EntryPersistable,
    MatchAll,
    Persistable,
    PersistenceStore,
)

logger = logging.getLogger(__name__)


class DataCache:
    """Id index over every configured asset and entry type, built once per resolution pass.

    A type whose records cannot be read is treated as empty.
    """

    def __init__(
        self,
        store: PersistenceStore,
        asset_type: type[AssetPersistable],
        entry_types: Iterable[type[EntryPersistable]],
    ) -> None:
        self._assets: dict[str, AssetPersistable] = self._index(store, asset_type)
        self._entries: dict[str, EntryPersistable] = {}
        for entry_type in entry_types:
            self._entries.update(self._index(store, entry_type))

    @staticmethod
    def _index(store: PersistenceStore, record_type: type[Persistable]) -> dict[str, Persistable]:
        try:
            records = store.fetch_all(record_type, MatchAll())
        except StoreError as exc:
            logger.warning("Cannot read %s records for lookup: %s", record_type.__name__, exc)
            return {}
        return {record.id: record for record in records if record.id is not None}

    def __len__(self) -> int:
        return len(self._assets) + len(self._entries)

    def entry(self, entry_id: str) -> EntryPersistable | None:
        return self._entries.get(entry_id)

    def asset(self, asset_id: str) -> AssetPersistable | None:
        return self._assets.get(asset_id)

    def item(self, item_id: str, link_type: LinkType | None = None) -> Persistable | None:
        """Resolve a link target; entries win over assets when the link type is unknown."""
        if link_type == "Asset":
            return self.asset(item_id)
        if link_type == "Entry":
            return self.entry(item_id)
        found = self.entry(item_id)
        return found if found is not None else self.asset(item_id)
