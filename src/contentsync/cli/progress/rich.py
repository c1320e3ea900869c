"""Rich rendering of delta session progress."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn

from contentsync.core.contracts.sync import SyncSummary
from contentsync.core.engine.progress import SyncProgress

_PHASE_STYLES = {"Ingest": "cyan", "Resolve": "magenta", "Save": "green"}


def _describe(phase: str, detail: str = "") -> str:
    style = _PHASE_STYLES.get(phase, "white")
    return f"[{style}]{phase:<8}[/] {detail}".rstrip()


class RichSyncProgress(SyncProgress):
    """One Rich task per session phase, with running upsert/delete counts during Ingest.

    Use as a context manager::

        with RichSyncProgress() as progress:
            summary = DeltaSession(manager, progress=progress).apply(document)
    """

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]done[/]"),
            TextColumn("{task.description}"),
            BarColumn(bar_width=24),
            TextColumn("{task.completed:.0f}/{task.total:.0f}", style="dim"),
            TimeElapsedColumn(),
            console=console or Console(stderr=True),
        )
        self._tasks: dict[str, TaskID] = {}
        self._totals: dict[str, int] = {}

    def __enter__(self) -> RichSyncProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        # Resolve and Save are single steps; show them as one unit of work.
        self._totals[phase] = total if total is not None else 1
        self._tasks[phase] = self._progress.add_task(_describe(phase), total=self._totals[phase])

    def page_done(self, page: int, summary: SyncSummary) -> None:
        task_id = self._tasks.get("Ingest")
        if task_id is None:
            return
        upserted = summary.assets_upserted + summary.entries_upserted
        deleted = summary.assets_deleted + summary.entries_deleted
        self._progress.update(
            task_id,
            completed=page,
            description=_describe("Ingest", f"{upserted} upserted, {deleted} deleted"),
        )

    def phase_done(self, phase: str) -> None:
        task_id = self._tasks.get(phase)
        if task_id is not None:
            self._progress.update(task_id, completed=self._totals[phase])

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._tasks.get(phase)
        if task_id is not None:
            self._progress.update(task_id, description=_describe(phase, f"[red]failed: {escape(str(error))}[/]"))
            self._progress.stop_task(task_id)
