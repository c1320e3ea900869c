"""JSON snapshot-backed persistence store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from contentsync.core.contracts.exceptions import ConfigError, StoreError
from contentsync.core.contracts.model import PersistenceModel
from contentsync.core.contracts.store import Persistable
from contentsync.core.stores.memory import InMemoryStore

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class RecordRef(BaseModel):
    type: str
    id: str


class SnapshotRecord(BaseModel):
    properties: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, RecordRef | list[RecordRef] | None] = Field(default_factory=dict)


class Snapshot(BaseModel):
    version: int = SNAPSHOT_VERSION
    records: dict[str, list[SnapshotRecord]] = Field(default_factory=dict)


def _model_types(model: PersistenceModel) -> list[type[Persistable]]:
    return [model.space_type, model.asset_type, *model.entry_types]


class JsonSnapshotStore(InMemoryStore):
    """In-memory store persisted as a JSON snapshot on every :meth:`save`.

    Property values are written in pydantic JSON mode; relationship values are
    written as ``{"type", "id"}`` references and re-linked after loading.

    Args:
        path: Snapshot file. A missing file starts an empty store.
        model: Persistence model naming every record type the snapshot may hold.
    """

    def __init__(self, path: Path, model: PersistenceModel) -> None:
        super().__init__()
        self._path = path
        self._types = {record_type.__name__: record_type for record_type in _model_types(model)}
        if path.exists():
            self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        try:
            payload: Any = json.loads(self._path.read_text(encoding="utf-8"))
            snapshot = Snapshot.model_validate(payload)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            raise ConfigError(f"invalid store snapshot: {self._path}") from exc
        if snapshot.version != SNAPSHOT_VERSION:
            raise ConfigError(f"unsupported store snapshot version {snapshot.version}: {self._path}")

        index: dict[tuple[str, str], Persistable] = {}
        pending: list[tuple[Persistable, SnapshotRecord]] = []
        for type_name, stored_records in snapshot.records.items():
            record_type = self._types.get(type_name)
            if record_type is None:
                logger.warning("Ignoring %d snapshot records of unknown type %s", len(stored_records), type_name)
                continue
            for stored in stored_records:
                try:
                    record = record_type.model_validate(stored.properties)
                except ValidationError as exc:
                    raise ConfigError(f"invalid {type_name} record in store snapshot: {self._path}") from exc
                self._records.setdefault(record_type, []).append(record)
                if record.id is not None:
                    index[(type_name, record.id)] = record
                pending.append((record, stored))

        for record, stored in pending:
            for name, value in stored.relationships.items():
                if isinstance(value, list):
                    targets = [index.get((ref.type, ref.id)) for ref in value]
                    setattr(record, name, [target for target in targets if target is not None])
                elif value is not None:
                    setattr(record, name, index.get((value.type, value.id)))

        logger.debug("Loaded %d records from %s", len(pending), self._path)

    def _dump_record(self, record: Persistable) -> SnapshotRecord:
        record_type = type(record)
        relationship_names = record_type.relationship_names()
        properties = record.model_dump(mode="json", exclude=set(relationship_names))
        relationships: dict[str, RecordRef | list[RecordRef] | None] = {}
        for name in relationship_names:
            value = getattr(record, name)
            if isinstance(value, (list, tuple)):
                relationships[name] = [_ref(target) for target in value if target.id is not None]
            elif isinstance(value, Persistable) and value.id is not None:
                relationships[name] = _ref(value)
            else:
                relationships[name] = None
        return SnapshotRecord(properties=properties, relationships=relationships)

    def save(self) -> None:
        super().save()
        snapshot = Snapshot(
            records={
                record_type.__name__: [self._dump_record(record) for record in records]
                for record_type, records in self._records.items()
            }
        )
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"failed to write store snapshot: {self._path}", operation="save") from exc


def _ref(record: Persistable) -> RecordRef:
    return RecordRef(type=type(record).__name__, id=record.id or "")
