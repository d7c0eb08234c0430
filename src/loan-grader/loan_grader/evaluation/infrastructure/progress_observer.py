"""ProgressGradingObserver — renders a Rich progress bar over the cases on stderr."""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


def _make_progress(console: Console) -> Progress:
    """Create a Progress instance with the standard column layout."""
    return Progress(
        TextColumn("{task.description}"),
        BarColumn(bar_width=30, complete_style="bright_green"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        TextColumn("{task.fields[points]}"),
        console=console,
        transient=True,
    )


class ProgressGradingObserver:
    """Shows which case is running and how many points have been earned so far.

    Only grading_started, case_started, case_completed, grading_completed and
    grading_failed affect output; case_no_result is a no-op.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).
    The counters are still maintained.

    Does NOT inherit from GradingObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self.total = 0
        self.completed = 0
        self.points = 0
        self.max_points = 0
        self.current_case: str | None = None

    def _points_label(self) -> str:
        return f"{self.points}/{self.max_points} pts"

    def _refresh(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=self.completed,
            description=self.current_case or "Grading",
            points=self._points_label(),
        )

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def grading_started(
        self, run_id: str, executable: str, case_names: list[str]
    ) -> None:
        # Reset state from any previous run.
        self._stop()
        self.total = len(case_names)
        self.completed = 0
        self.points = 0
        self.max_points = 0
        self.current_case = None

        if self._disabled:
            return

        self._progress = _make_progress(console=Console(stderr=True))
        self._task_id = self._progress.add_task(
            description="Grading",
            total=float(self.total),
            points=self._points_label(),
        )
        self._progress.start()

    def grading_completed(
        self, run_id: str, percentage: int, elapsed_seconds: float
    ) -> None:
        self.current_case = None
        self._stop()

    def grading_failed(self, run_id: str, error: Exception) -> None:
        self.current_case = None
        self._stop()

    def case_started(self, run_id: str, case: str, amount: int) -> None:
        self.current_case = case
        self._refresh()

    def case_no_result(
        self, run_id: str, case: str, failure: str, values: list[str]
    ) -> None:
        pass

    def case_completed(
        self,
        run_id: str,
        case: str,
        score: int,
        max_score: int,
        diagnostics: list[str],
    ) -> None:
        self.completed += 1
        self.points += score
        self.max_points += max_score
        self._refresh()
