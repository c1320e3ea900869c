"""Exception hierarchy for contentsync.

All contentsync exceptions inherit from :class:`ContentSyncError`, so a host can
catch any library failure with a single ``except`` clause while still telling
configuration, store and engine failures apart.
"""

from __future__ import annotations


class ContentSyncError(Exception):
    """Base exception for all contentsync errors."""


class ConfigError(ContentSyncError):
    """Configuration or persistence model loading/validation failure."""


class StoreError(ContentSyncError):
    """A persistence store primitive failed.

    Attributes:
        operation: Store primitive that failed (``fetch_all``, ``create``, ...).
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class SyncError(ContentSyncError):
    """Engine-level synchronization failure that aborts the sync session."""


class DeltaLoadError(ContentSyncError):
    """Delta batch file loading/parsing failure."""
