"""Configuration contract for a contentsync host."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ContentSyncConfig(BaseModel):
    """Settings for running delta batches against a snapshot store.

    Attributes:
        model: Import path (``package.module:ATTR``) of the host's ``PersistenceModel``.
        snapshot_path: JSON snapshot file backing the local store.
        resolve_each_page: Resolve relationships after every page instead of once per batch.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    model: str
    snapshot_path: Path = Field(default=Path("contentsync-store.json"), alias="snapshotPath")
    resolve_each_page: bool = Field(default=False, alias="resolveEachPage")
