"""Persistence model: which local types the engine writes to."""

from __future__ import annotations

from dataclasses import dataclass, field

from contentsync.core.contracts.exceptions import ConfigError
from contentsync.core.contracts.store import AssetPersistable, EntryPersistable, SyncSpacePersistable


@dataclass(frozen=True)
class PersistenceModel:
    """Local record types for assets, each supported content type, and the sync cursor.

    Entries whose content type has no registered entry type are ignored by the engine.
    """

    asset_type: type[AssetPersistable]
    entry_types: tuple[type[EntryPersistable], ...]
    space_type: type[SyncSpacePersistable]
    _by_content_type: dict[str, type[EntryPersistable]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entry_types = tuple(self.entry_types)
        by_content_type: dict[str, type[EntryPersistable]] = {}
        for entry_type in entry_types:
            content_type_id = getattr(entry_type, "content_type_id", None)
            if not content_type_id:
                raise ConfigError(f"entry type {entry_type.__name__} does not declare a content_type_id")
            if content_type_id in by_content_type:
                raise ConfigError(
                    f"content type {content_type_id!r} registered by both "
                    f"{by_content_type[content_type_id].__name__} and {entry_type.__name__}"
                )
            by_content_type[content_type_id] = entry_type
        object.__setattr__(self, "entry_types", entry_types)
        object.__setattr__(self, "_by_content_type", by_content_type)

    def entry_type_for(self, content_type_id: str | None) -> type[EntryPersistable] | None:
        if content_type_id is None:
            return None
        return self._by_content_type.get(content_type_id)
