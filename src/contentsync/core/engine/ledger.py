"""Deferred relationship ledger."""

from __future__ import annotations

from contentsync.core.contracts.relationships import PendingRelationships


class RelationshipLedger:
    """Outgoing relationships per entry id, accumulated during ingestion and drained by resolution."""

    def __init__(self) -> None:
        self._pending: dict[str, PendingRelationships] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._pending

    def record(self, entry_id: str, relationships: PendingRelationships) -> None:
        # Latest delta for an entry replaces anything recorded earlier in the batch.
        self._pending[entry_id] = dict(relationships)

    def pending(self, entry_id: str) -> PendingRelationships | None:
        return self._pending.get(entry_id)

    def drain(self) -> dict[str, PendingRelationships]:
        snapshot = self._pending
        self._pending = {}
        return snapshot
