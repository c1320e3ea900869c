"""Sync result contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ResolutionReport(BaseModel):
    """Outcome of one relationship resolution pass."""

    entries_resolved: int = 0
    entries_missing: int = 0
    links_resolved: int = 0
    links_dangling: int = 0

    def merge(self, other: ResolutionReport) -> ResolutionReport:
        return ResolutionReport(
            entries_resolved=self.entries_resolved + other.entries_resolved,
            entries_missing=self.entries_missing + other.entries_missing,
            links_resolved=self.links_resolved + other.links_resolved,
            links_dangling=self.links_dangling + other.links_dangling,
        )


class SyncSummary(BaseModel):
    """Value returned by :meth:`DeltaSession.apply`."""

    pages: int = 0
    assets_upserted: int = 0
    entries_upserted: int = 0
    entries_skipped: int = 0
    assets_deleted: int = 0
    entries_deleted: int = 0
    resolution: ResolutionReport = Field(default_factory=ResolutionReport)
    sync_token: str | None = None
