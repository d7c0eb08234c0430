"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class GradingObserver(Protocol):
    """Observer port emitting structured events during a grading run.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def grading_started(
        self, run_id: str, executable: str, case_names: list[str]
    ) -> None: ...

    def grading_completed(
        self, run_id: str, percentage: int, elapsed_seconds: float
    ) -> None: ...

    def grading_failed(self, run_id: str, error: Exception) -> None: ...

    def case_started(self, run_id: str, case: str, amount: int) -> None: ...

    def case_no_result(
        self, run_id: str, case: str, failure: str, values: list[str]
    ) -> None: ...

    def case_completed(
        self,
        run_id: str,
        case: str,
        score: int,
        max_score: int,
        diagnostics: list[str],
    ) -> None: ...
