"""Persistence store contract and local record base types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any, ClassVar, TypeVar, get_args

from pydantic import BaseModel

from contentsync.core.contracts.exceptions import StoreError

_SYS_FIELDS = frozenset({"id", "created_at", "updated_at"})


def _references_persistable(annotation: Any) -> bool:
    if isinstance(annotation, type) and issubclass(annotation, Persistable):
        return True
    return any(_references_persistable(arg) for arg in get_args(annotation))


class Persistable(BaseModel):
    """Base for every local record kept in a persistence store.

    Declared fields whose annotation references another :class:`Persistable`
    subclass (``Author | None``, ``list[Asset]``) are relationships; the
    remaining fields, except the sys fields, are plain properties.
    """

    id: str | None = None

    @classmethod
    def relationship_names(cls) -> list[str]:
        return [name for name, info in cls.model_fields.items() if _references_persistable(info.annotation)]

    @classmethod
    def property_names(cls) -> list[str]:
        relationships = set(cls.relationship_names())
        return [name for name in cls.model_fields if name not in _SYS_FIELDS and name not in relationships]


class AssetPersistable(Persistable):
    title: str | None = None
    asset_description: str | None = None
    url_string: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EntryPersistable(Persistable):
    """Local record for a structured entry of one content type."""

    content_type_id: ClassVar[str]

    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def field_mapping(cls) -> dict[str, str] | None:
        """Explicit remote field name to property name mapping, or ``None`` to derive one."""
        return None


class SyncSpacePersistable(Persistable):
    """Singleton record holding the delta stream resumption token."""

    sync_token: str | None = None


RecordT = TypeVar("RecordT", bound=Persistable)


@dataclass(frozen=True)
class IdEquals:
    id: str

    def matches(self, record: Persistable) -> bool:
        return record.id == self.id


@dataclass(frozen=True)
class MatchAll:
    def matches(self, record: Persistable) -> bool:
        return True


Predicate = IdEquals | MatchAll


def predicate_for(record_id: str) -> IdEquals:
    return IdEquals(record_id)


class LookupStatus(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class StoreLookup:
    """Outcome of a tolerated store read, keeping "no match" apart from "read failed"."""

    status: LookupStatus
    records: tuple[Any, ...] = ()
    error: StoreError | None = field(default=None, compare=False)

    @classmethod
    def of(cls, records: list[Any]) -> StoreLookup:
        if not records:
            return cls(status=LookupStatus.NOT_FOUND)
        return cls(status=LookupStatus.FOUND, records=tuple(records))

    @classmethod
    def failed(cls, error: StoreError) -> StoreLookup:
        return cls(status=LookupStatus.FAILED, error=error)

    @property
    def first(self) -> Any | None:
        return self.records[0] if self.records else None


class PersistenceStore(ABC):
    """Generic persistence primitives the synchronization engine consumes.

    Implementations raise :class:`StoreError` when a primitive fails.
    """

    @abstractmethod
    def fetch_all(self, type: type[RecordT], predicate: Predicate) -> list[RecordT]: ...  # pragma: no cover

    @abstractmethod
    def create(self, type: type[RecordT]) -> RecordT: ...  # pragma: no cover

    @abstractmethod
    def delete(self, type: type[Persistable], predicate: Predicate) -> int: ...  # pragma: no cover

    @abstractmethod
    def save(self) -> None: ...  # pragma: no cover

    @abstractmethod
    def properties(self, type: type[Persistable]) -> list[str]: ...  # pragma: no cover

    @abstractmethod
    def relationships(self, type: type[Persistable]) -> list[str]: ...  # pragma: no cover
