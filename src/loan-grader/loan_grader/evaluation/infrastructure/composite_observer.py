"""CompositeGradingObserver — fans out all events to a list of observers."""

from loan_grader.evaluation.domain.observer import GradingObserver


class CompositeGradingObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from GradingObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[GradingObserver]) -> None:
        self._observers = observers

    def grading_started(
        self, run_id: str, executable: str, case_names: list[str]
    ) -> None:
        for obs in self._observers:
            obs.grading_started(
                run_id=run_id, executable=executable, case_names=case_names
            )

    def grading_completed(
        self, run_id: str, percentage: int, elapsed_seconds: float
    ) -> None:
        for obs in self._observers:
            obs.grading_completed(
                run_id=run_id, percentage=percentage, elapsed_seconds=elapsed_seconds
            )

    def grading_failed(self, run_id: str, error: Exception) -> None:
        for obs in self._observers:
            obs.grading_failed(run_id=run_id, error=error)

    def case_started(self, run_id: str, case: str, amount: int) -> None:
        for obs in self._observers:
            obs.case_started(run_id=run_id, case=case, amount=amount)

    def case_no_result(
        self, run_id: str, case: str, failure: str, values: list[str]
    ) -> None:
        for obs in self._observers:
            obs.case_no_result(run_id=run_id, case=case, failure=failure, values=values)

    def case_completed(
        self,
        run_id: str,
        case: str,
        score: int,
        max_score: int,
        diagnostics: list[str],
    ) -> None:
        for obs in self._observers:
            obs.case_completed(
                run_id=run_id,
                case=case,
                score=score,
                max_score=max_score,
                diagnostics=diagnostics,
            )
