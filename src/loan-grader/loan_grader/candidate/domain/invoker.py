"""CandidateInvoker Protocol — structural interface for running a candidate."""

from typing import Protocol


class CandidateInvoker(Protocol):
    """Runs the candidate once for a loan amount and returns its stdout lines."""

    def invoke(self, amount: int) -> list[str]: ...
