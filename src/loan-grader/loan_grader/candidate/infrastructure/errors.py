"""Error types raised by candidate infrastructure."""

from loan_grader.core.errors import GraderError


class CandidateLaunchError(GraderError):
    """Raised when the candidate process cannot be started or its output read."""

    def __init__(self, executable: str, reason: str) -> None:
        self.executable = executable
        super().__init__(f"Failed to run candidate {executable}: {reason}")


class CandidateTimeoutError(GraderError):
    """Raised when the candidate does not exit within the configured timeout."""

    def __init__(self, executable: str, amount: int, timeout_seconds: float) -> None:
        self.executable = executable
        self.amount = amount
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Failed to run candidate {executable}: no exit within"
            f" {timeout_seconds}s for amount {amount}"
        )
