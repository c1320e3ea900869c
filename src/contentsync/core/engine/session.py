"""Delta session driver: feeds a delta batch through the synchronization manager."""

from __future__ import annotations

import logging

from contentsync.core.contracts.remote import DeltaDocument, DeltaPage
from contentsync.core.contracts.sync import SyncSummary
from contentsync.core.engine.manager import SynchronizationManager
from contentsync.core.engine.progress import NullSyncProgress, SyncProgress

logger = logging.getLogger(__name__)


class DeltaSession:
    """Applies delta pages in order, resolves relationships, then stores the sync token.

    Within a page events are applied as assets, entries, deleted assets,
    deleted entries. Relationships resolve once after the last page unless
    *resolve_each_page* is set; a failing page leaves earlier upserts in place
    and their links pending in the manager.

    Args:
        manager: Manager owning the store, ledger and mapping cache.
        resolve_each_page: Resolve after every page instead of once per batch.
        progress: Optional observer for phase events.
    """

    def __init__(
        self,
        manager: SynchronizationManager,
        *,
        resolve_each_page: bool = False,
        progress: SyncProgress | None = None,
    ) -> None:
        self._manager = manager
        self._resolve_each_page = resolve_each_page
        self._progress: SyncProgress = progress or NullSyncProgress()

    def apply(self, document: DeltaDocument) -> SyncSummary:
        summary = SyncSummary()
        self._ingest(document.pages, summary)
        if not self._resolve_each_page:
            self._resolve(summary)
        self._commit(document.sync_token, summary)
        return summary

    def _ingest(self, pages: list[DeltaPage], summary: SyncSummary) -> None:
        self._progress.phase_start("Ingest", total=len(pages))
        try:
            for number, page in enumerate(pages, start=1):
                self._apply_page(page, summary)
                summary.pages += 1
                if self._resolve_each_page:
                    report = self._manager.resolve_relationships()
                    summary.resolution = summary.resolution.merge(report)
                self._progress.page_done(number, summary)
            self._progress.phase_done("Ingest")
        except BaseException as exc:
            self._progress.phase_error("Ingest", exc)
            raise

    def _apply_page(self, page: DeltaPage, summary: SyncSummary) -> None:
        logger.debug(
            "Applying page: %d assets, %d entries, %d deleted assets, %d deleted entries",
            len(page.assets),
            len(page.entries),
            len(page.deleted_asset_ids),
            len(page.deleted_entry_ids),
        )
        for asset in page.assets:
            self._manager.create_asset(asset)
            summary.assets_upserted += 1
        for entry in page.entries:
            if self._manager.create_entry(entry) is None:
                summary.entries_skipped += 1
            else:
                summary.entries_upserted += 1
        for asset_id in page.deleted_asset_ids:
            summary.assets_deleted += self._manager.delete_asset(asset_id)
        for entry_id in page.deleted_entry_ids:
            summary.entries_deleted += self._manager.delete_entry(entry_id)

    def _resolve(self, summary: SyncSummary) -> None:
        self._progress.phase_start("Resolve")
        try:
            summary.resolution = summary.resolution.merge(self._manager.resolve_relationships())
            self._progress.phase_done("Resolve")
        except BaseException as exc:
            self._progress.phase_error("Resolve", exc)
            raise

    def _commit(self, sync_token: str | None, summary: SyncSummary) -> None:
        self._progress.phase_start("Save")
        try:
            if sync_token is not None:
                self._manager.update_sync_token(sync_token)
            else:
                self._manager.save()
            summary.sync_token = self._manager.sync_token
            self._progress.phase_done("Save")
        except BaseException as exc:
            self._progress.phase_error("Save", exc)
            raise
