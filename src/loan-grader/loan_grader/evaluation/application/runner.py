"""GradingRunner — orchestrates the full grading loop."""

import time
import uuid

from loan_grader.candidate.domain.invoker import CandidateInvoker
from loan_grader.candidate.domain.parser import parse_output
from loan_grader.evaluation.domain.observer import GradingObserver
from loan_grader.evaluation.domain.summary import GradingSummary
from loan_grader.scoring.domain.aggregate import final_percentage
from loan_grader.scoring.domain.case import GradingCase
from loan_grader.scoring.domain.result import CaseResult


class GradingRunner:
    """Runs every grading case against one candidate and aggregates the scores.

    Cases run strictly one after another, each with a single candidate
    invocation. The runner holds no state between runs, so one instance may be
    reused.
    """

    def __init__(
        self,
        executable: str,
        invoker: CandidateInvoker,
        cases: list[GradingCase],
        observer: GradingObserver,
    ) -> None:
        self._executable = executable
        self._invoker = invoker
        self._cases = cases
        self._observer = observer

    def run(self) -> GradingSummary:
        """Execute every case and return the summary.

        Errors from the invoker propagate unchanged.
        """
        run_id = str(uuid.uuid4())
        results: list[CaseResult] = []
        return self._run(run_id=run_id, results=results)

    def score(self) -> GradingSummary:
        """Like run(), but any error collapses the run to a 0% summary."""
        run_id = str(uuid.uuid4())
        results: list[CaseResult] = []
        try:
            return self._run(run_id=run_id, results=results)
        except Exception as exc:  # noqa: BLE001
            self._observer.grading_failed(run_id=run_id, error=exc)
            return GradingSummary(
                run_id=run_id,
                executable=self._executable,
                percentage=0,
                results=results,
                failure_reason=str(exc) or type(exc).__name__,
            )

    def _run(self, run_id: str, results: list[CaseResult]) -> GradingSummary:
        """Append each case result to *results* as it completes."""
        self._observer.grading_started(
            run_id=run_id,
            executable=self._executable,
            case_names=[case.name for case in self._cases],
        )
        started_at = time.monotonic()

        for case in self._cases:
            results.append(self._run_case(run_id=run_id, case=case))

        percentage = final_percentage(results=results)
        self._observer.grading_completed(
            run_id=run_id,
            percentage=percentage,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return GradingSummary(
            run_id=run_id,
            executable=self._executable,
            percentage=percentage,
            results=list(results),
        )

    def _run_case(self, run_id: str, case: GradingCase) -> CaseResult:
        self._observer.case_started(run_id=run_id, case=case.name, amount=case.amount)

        lines = self._invoker.invoke(amount=case.amount)
        parsed = parse_output(lines=lines)
        if parsed.failure is not None:
            self._observer.case_no_result(
                run_id=run_id,
                case=case.name,
                failure=parsed.failure.value,
                values=parsed.values,
            )

        result = case.score(parsed=parsed)
        self._observer.case_completed(
            run_id=run_id,
            case=result.name,
            score=result.score,
            max_score=result.max_score,
            diagnostics=result.diagnostics,
        )
        return result
