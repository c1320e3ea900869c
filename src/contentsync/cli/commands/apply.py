"""Apply command: run a delta batch against the snapshot store."""

from __future__ import annotations

import argparse

from contentsync import ContentSyncConfig, SyncSummary
from contentsync.cli.progress.rich import RichSyncProgress


def format_apply_summary(summary: SyncSummary, config: ContentSyncConfig) -> str:
    resolution = summary.resolution
    lines = [
        "",
        "contentsync - delta applied",
        "",
        f"  Pages:     {summary.pages}",
        f"  Assets:    {summary.assets_upserted} upserted, {summary.assets_deleted} deleted",
        f"  Entries:   {summary.entries_upserted} upserted, {summary.entries_deleted} deleted",
    ]
    if summary.entries_skipped:
        lines.append(f"  Skipped:   {summary.entries_skipped} entries of unmodelled content types")
    lines.append(f"  Links:     {resolution.links_resolved} resolved, {resolution.links_dangling} dangling")
    if resolution.entries_missing:
        lines.append(f"  Dropped:   relationships of {resolution.entries_missing} missing entries")
    lines.extend(
        [
            "",
            f"  Token:     {summary.sync_token or '(none)'}",
            f"  Store:     {config.snapshot_path}",
            "",
        ]
    )
    return "\n".join(lines)


def run_apply(args: argparse.Namespace) -> SyncSummary:
    import contentsync.cli as cli

    config = cli.load_config(args.config)
    if args.resolve_each_page is not None:
        config = config.model_copy(update={"resolve_each_page": args.resolve_each_page})
    document = cli.load_delta(args.delta)
    manager = cli.build_manager(config)

    if not args.verbose:
        with RichSyncProgress() as progress:
            session = cli.DeltaSession(manager, resolve_each_page=config.resolve_each_page, progress=progress)
            summary = session.apply(document)
    else:
        session = cli.DeltaSession(manager, resolve_each_page=config.resolve_each_page)
        summary = session.apply(document)

    print(format_apply_summary(summary, config))
    return summary


__all__ = ["format_apply_summary", "run_apply"]
