"""ProgressBatchObserver — renders a Rich progress bar for a batch pass on stderr."""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressBatchObserver:
    """Shows one bar per batch: green count of allocated, red count of failed students.

    Only batch_started, student_completed, student_failed and batch_completed
    produce output; student_started is a no-op.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self._allocated = 0
        self._failed = 0

    @property
    def allocated(self) -> int:
        return self._allocated

    @property
    def failed(self) -> int:
        return self._failed

    def _advance(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            advance=1,
            allocated=self._allocated,
            failed=self._failed,
        )

    def batch_started(self, batch_id: str, assignment_id: str, total_students: int) -> None:
        self._allocated = 0
        self._failed = 0
        self._progress = None
        self._task_id = None
        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TextColumn("[bright_green]{task.fields[allocated]} ok[/bright_green]"),
            TextColumn("[red]{task.fields[failed]} failed[/red]"),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description=f"[bold]Allocating {assignment_id}[/bold]",
            total=float(total_students),
            allocated=0,
            failed=0,
        )
        self._progress.start()

    def batch_completed(
        self,
        batch_id: str,
        assignment_id: str,
        total_allocated: int,
        total_failed: int,
        elapsed_seconds: float,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def student_started(self, batch_id: str, student_id: str) -> None:
        pass

    def student_completed(self, batch_id: str, student_id: str) -> None:
        self._allocated += 1
        self._advance()

    def student_failed(self, batch_id: str, student_id: str, reason: str) -> None:
        self._failed += 1
        self._advance()
