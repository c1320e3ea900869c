"""Deferred relationship targets recorded during ingestion."""

from __future__ import annotations

from dataclasses import dataclass

from contentsync.core.contracts.remote import LinkType


@dataclass(frozen=True)
class SingleLink:
    """To-one relationship: a single target id."""

    id: str
    link_type: LinkType | None = None


@dataclass(frozen=True)
class ManyLinks:
    """To-many relationship: target ids in remote order, duplicates included."""

    ids: tuple[str, ...]
    link_type: LinkType | None = None


RelationshipTarget = SingleLink | ManyLinks

PendingRelationships = dict[str, RelationshipTarget]
"""Field name to relationship target for one entry."""
