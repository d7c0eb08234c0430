"""GradingCase Protocol — one fixed scenario with its own rubric."""

from typing import Protocol

from loan_grader.candidate.domain.parser import ParsedOutput
from loan_grader.scoring.domain.result import CaseResult


class GradingCase(Protocol):
    """A loan amount to request plus the rubric applied to what comes back.

    ``score`` must be a pure function of the parsed output.
    """

    @property
    def name(self) -> str: ...

    @property
    def amount(self) -> int: ...

    @property
    def max_score(self) -> int: ...

    def score(self, parsed: ParsedOutput) -> CaseResult: ...
