"""CaseResult — the score one grading case awarded, with its diagnostics."""

from fractions import Fraction
from typing import Self

from pydantic import BaseModel, Field, model_validator


class CaseResult(BaseModel, frozen=True):
    """Immutable outcome of a single grading case.

    Diagnostics are advisory text explaining a downgraded score; they never
    affect the score itself.
    """

    name: str = Field(min_length=1)
    score: int = Field(ge=0)
    max_score: int = Field(gt=0)
    diagnostics: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _score_within_max(self) -> Self:
        if self.score > self.max_score:
            raise ValueError(
                f"score {self.score} exceeds max_score {self.max_score}"
            )
        return self

    @property
    def ratio(self) -> Fraction:
        return Fraction(self.score, self.max_score)
