"""In-memory persistence store."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError

from contentsync.core.contracts.exceptions import StoreError
from contentsync.core.contracts.store import Persistable, PersistenceStore, Predicate, RecordT


@dataclass(frozen=True)
class StoreOperation:
    """Deterministic store operation log entry."""

    sequence: int
    name: str
    type_name: str | None
    payload: dict[str, str]


class InMemoryStore(PersistenceStore):
    """Store that keeps records per type in insertion order.

    Schema introspection reads the pydantic field declarations of the record
    types. Every primitive is appended to :attr:`operations` so callers can
    audit what the engine did.
    """

    def __init__(self) -> None:
        self._records: dict[type[Persistable], list[Persistable]] = {}
        self._operation_counter = 0
        self._operations: list[StoreOperation] = []
        self.commits = 0

    @property
    def operations(self) -> tuple[StoreOperation, ...]:
        return tuple(self._operations)

    def _record_operation(
        self, name: str, type: type[Persistable] | None, payload: dict[str, str] | None = None
    ) -> None:
        self._operation_counter += 1
        self._operations.append(
            StoreOperation(
                sequence=self._operation_counter,
                name=name,
                type_name=type.__name__ if type is not None else None,
                payload=payload or {},
            )
        )

    def records(self, type: type[RecordT]) -> list[RecordT]:
        return list(self._records.get(type, []))  # type: ignore[arg-type]

    def fetch_all(self, type: type[RecordT], predicate: Predicate) -> list[RecordT]:
        self._record_operation("fetch_all", type, {"predicate": repr(predicate)})
        return [record for record in self._records.get(type, []) if predicate.matches(record)]  # type: ignore[misc]

    def create(self, type: type[RecordT]) -> RecordT:
        self._record_operation("create", type)
        try:
            record = type()
        except ValidationError as exc:
            raise StoreError(f"cannot instantiate record type {type.__name__}", operation="create") from exc
        self._records.setdefault(type, []).append(record)
        return record

    def delete(self, type: type[Persistable], predicate: Predicate) -> int:
        self._record_operation("delete", type, {"predicate": repr(predicate)})
        records = self._records.get(type, [])
        kept = [record for record in records if not predicate.matches(record)]
        removed = len(records) - len(kept)
        if records:
            self._records[type] = kept
        return removed

    def save(self) -> None:
        self._record_operation("save", None)
        self.commits += 1

    def properties(self, type: type[Persistable]) -> list[str]:
        return type.property_names()

    def relationships(self, type: type[Persistable]) -> list[str]:
        return type.relationship_names()
