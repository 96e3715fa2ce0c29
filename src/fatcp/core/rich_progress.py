# src/fatcp/core/rich_progress.py
from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from fatcp.core.progress import Phase, ProgressReporter

_LABELS: dict[str, str] = {"scan": "Scanning", "copy": "Copying"}


class RichCopyReporter(ProgressReporter):
    """One Rich task per phase; 'scan' has no total and spins until it ends."""

    def __init__(self, progress: Progress) -> None:
        self.progress = progress
        self._tasks: dict[str, TaskID] = {}

    def start(
        self, phase: Phase, total: int | None = None, text: str | None = None
    ) -> None:
        self._tasks[phase] = self.progress.add_task(
            _LABELS.get(phase, phase.title()), total=total, detail=text or ""
        )

    def update(self, phase: Phase, advance: int = 1, text: str | None = None) -> None:
        task_id = self._tasks.get(phase)
        if task_id is None:
            return
        if text is None:
            self.progress.advance(task_id, advance)
        else:
            self.progress.update(task_id, advance=advance, detail=text)

    def end(self, phase: Phase) -> None:
        task_id = self._tasks.pop(phase, None)
        if task_id is None:
            return
        task = next(t for t in self.progress.tasks if t.id == task_id)
        if task.total is None:
            # scan: show how many files were found, then freeze the row
            self.progress.update(
                task_id, total=task.completed, detail=f"{int(task.completed)} file(s)"
            )
        else:
            self.progress.update(task_id, completed=task.total, detail="")


def make_copy_progress(console: Console) -> tuple[Progress, RichCopyReporter]:
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        TextColumn("{task.fields[detail]}", style="dim"),
        console=console,
        transient=False,
    )
    return progress, RichCopyReporter(progress)
