"""Progress reporting hooks for delta sessions.

:class:`DeltaSession` reports the Ingest, Resolve and Save phases and every
applied page to a ``SyncProgress``; the CLI renders them with Rich.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from contentsync.core.contracts.sync import SyncSummary


class SyncProgress(ABC):
    """Observer for delta session progress."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A phase is starting. *total* is the page count for Ingest, else ``None``."""
        ...  # pragma: no cover

    @abstractmethod
    def page_done(self, page: int, summary: SyncSummary) -> None:
        """Page number *page* (1-based) was applied; *summary* holds the running totals."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        ...  # pragma: no cover


class NullSyncProgress(SyncProgress):
    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def page_done(self, page: int, summary: SyncSummary) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
