"""StructlogGradingObserver — production observer that delegates to structlog."""

import structlog


class StructlogGradingObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from GradingObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def grading_started(
        self, run_id: str, executable: str, case_names: list[str]
    ) -> None:
        self._log.info(
            "grading.started",
            run_id=run_id,
            executable=executable,
            total_cases=len(case_names),
            case_names=case_names,
        )

    def grading_completed(
        self, run_id: str, percentage: int, elapsed_seconds: float
    ) -> None:
        self._log.info(
            "grading.completed",
            run_id=run_id,
            percentage=percentage,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def grading_failed(self, run_id: str, error: Exception) -> None:
        self._log.error(
            "grading.failed",
            run_id=run_id,
            reason=str(error),
            exc_info=error,
        )

    def case_started(self, run_id: str, case: str, amount: int) -> None:
        self._log.info("grading.case.started", run_id=run_id, case=case, amount=amount)

    def case_no_result(
        self, run_id: str, case: str, failure: str, values: list[str]
    ) -> None:
        self._log.info(
            "grading.case.no_result",
            run_id=run_id,
            case=case,
            failure=failure,
            values=values,
        )

    def case_completed(
        self,
        run_id: str,
        case: str,
        score: int,
        max_score: int,
        diagnostics: list[str],
    ) -> None:
        self._log.info(
            "grading.case.completed",
            run_id=run_id,
            case=case,
            score=score,
            max_score=max_score,
        )
        for diagnostic in diagnostics:
            self._log.warning(
                "grading.case.diagnostic",
                run_id=run_id,
                case=case,
                diagnostic=diagnostic,
            )
