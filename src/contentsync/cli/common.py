"""Shared CLI helpers."""

from __future__ import annotations

from contentsync import ContentSyncConfig, JsonSnapshotStore, SynchronizationManager, load_model


def build_manager(config: ContentSyncConfig) -> SynchronizationManager:
    model = load_model(config.model)
    store = JsonSnapshotStore(config.snapshot_path, model)
    return SynchronizationManager(store, model)


__all__ = ["build_manager"]
