"""GradingSummary — the aggregate result of a grading run."""

from pydantic import BaseModel, Field

from loan_grader.scoring.domain.result import CaseResult


class GradingSummary(BaseModel, frozen=True):
    """Immutable summary returned when a grading run ends.

    A run that collapsed because of an error carries ``failure_reason``, a
    percentage of 0, and whatever case results were completed before the error.
    """

    run_id: str = Field(min_length=1)
    executable: str = Field(min_length=1)
    percentage: int = Field(ge=0, le=100)
    results: list[CaseResult]
    failure_reason: str | None = None

    @property
    def failed(self) -> bool:
        return self.failure_reason is not None
