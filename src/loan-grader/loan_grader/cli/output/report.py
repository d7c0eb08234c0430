"""Report formatting — turns a GradingSummary into printed lines and JSON."""

from typing import Any, TypeAlias

from loan_grader.evaluation.domain.summary import GradingSummary
from loan_grader.scoring.domain.result import CaseResult

JsonRecord: TypeAlias = dict[str, Any]


def format_case_lines(result: CaseResult) -> list[str]:
    """Diagnostics first, then the score line, each prefixed by the case name."""
    lines = [f"{result.name}: {diagnostic}" for diagnostic in result.diagnostics]
    lines.append(f"{result.name}: Score {result.score}/{result.max_score}")
    return lines


def format_status_line(executable: str) -> str:
    return f"Scoring executable at:{executable}"


def format_score_line(percentage: int) -> str:
    """The machine-parsable line downstream automation looks for."""
    return f"FS_SCORE:{percentage}%"


def format_report(summary: GradingSummary) -> list[str]:
    """Return every stdout line for *summary*, in print order.

    A collapsed run still reports the cases that finished before the error;
    the failure itself is reported on stderr by the caller.
    """
    lines: list[str] = []
    for result in summary.results:
        lines.extend(format_case_lines(result=result))
    lines.append(format_status_line(executable=summary.executable))
    lines.append(format_score_line(percentage=summary.percentage))
    return lines


def build_report_json(summary: GradingSummary) -> JsonRecord:
    """Build the JSON document written by ``--report``."""
    return {
        "run_id": summary.run_id,
        "executable": summary.executable,
        "score_percent": summary.percentage,
        "failed": summary.failed,
        "failure_reason": summary.failure_reason,
        "cases": [
            {
                "name": r.name,
                "score": r.score,
                "max_score": r.max_score,
                "diagnostics": list(r.diagnostics),
            }
            for r in summary.results
        ],
    }
