"""Remote field to local property mapping."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import TypeAdapter

from contentsync.core.contracts.exceptions import StoreError, SyncError
from contentsync.core.contracts.store import EntryPersistable, Persistable, PersistenceStore

logger = logging.getLogger(__name__)

Setter = Callable[[Persistable, Any], None]

_ARRAY_ADAPTER: TypeAdapter[list[Any]] = TypeAdapter(list[Any])


def encode_array(values: list[Any]) -> bytes:
    """Serialize an array-valued scalar field into the opaque blob stored on the record."""
    return _ARRAY_ADAPTER.dump_json(values)


def decode_array(blob: bytes) -> list[Any]:
    return _ARRAY_ADAPTER.validate_json(blob)


def _setter(name: str) -> Setter:
    def assign(record: Persistable, value: Any) -> None:
        setattr(record, name, value)

    return assign


class FieldMapper:
    """Derives and caches field mappings, and assigns mapped values by property name.

    Accessor tables are compiled once per entry type when the mapper is built.
    Derived mappings are cached per content type id for the mapper's lifetime;
    an explicit :meth:`EntryPersistable.field_mapping` is used verbatim and never cached.

    Raises:
        SyncError: If the store cannot describe an entry type's schema.
    """

    def __init__(self, store: PersistenceStore, entry_types: Iterable[type[EntryPersistable]]) -> None:
        self._store = store
        self._accessors: dict[type[EntryPersistable], dict[str, Setter]] = {}
        self._derived: dict[str, dict[str, str]] = {}
        for entry_type in entry_types:
            self._accessors[entry_type] = self._compile(entry_type)

    def _compile(self, entry_type: type[EntryPersistable]) -> dict[str, Setter]:
        try:
            names = [*self._store.properties(entry_type), *self._store.relationships(entry_type)]
        except StoreError as exc:
            raise SyncError(f"cannot introspect schema for {entry_type.__name__}") from exc
        return {name: _setter(name) for name in names}

    def accessors(self, entry_type: type[EntryPersistable]) -> dict[str, Setter]:
        table = self._accessors.get(entry_type)
        if table is None:
            table = self._compile(entry_type)
            self._accessors[entry_type] = table
        return table

    def setter(self, entry_type: type[EntryPersistable], name: str) -> Setter | None:
        return self.accessors(entry_type).get(name)

    def cached_mapping(self, content_type_id: str) -> dict[str, str] | None:
        return self._derived.get(content_type_id)

    def mapping_for(self, entry_type: type[EntryPersistable], fields: Mapping[str, Any]) -> dict[str, str]:
        explicit = entry_type.field_mapping()
        if explicit is not None:
            return dict(explicit)

        cached = self._derived.get(entry_type.content_type_id)
        if cached is not None:
            return cached

        try:
            property_names = set(self._store.properties(entry_type))
        except StoreError as exc:
            raise SyncError(f"cannot introspect schema for {entry_type.__name__}") from exc
        shared = sorted(property_names & set(fields))
        mapping = {name: name for name in shared}
        if not mapping:
            logger.debug("No shared fields for content type %s", entry_type.content_type_id)
        self._derived[entry_type.content_type_id] = mapping
        return mapping

    def apply(self, record: EntryPersistable, entry_type: type[EntryPersistable], fields: Mapping[str, Any]) -> None:
        """Copy mapped field values onto *record*, encoding array values into blobs."""
        for field_name, property_name in self.mapping_for(entry_type, fields).items():
            assign = self.setter(entry_type, property_name)
            if assign is None:
                logger.warning("%s has no property %r; skipping field %r", entry_type.__name__, property_name, field_name)
                continue
            value = fields.get(field_name)
            if isinstance(value, list):
                value = encode_array(value)
            assign(record, value)
