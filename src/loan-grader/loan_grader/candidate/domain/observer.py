"""CandidateObserver port — domain events emitted while running a candidate."""

from typing import Protocol


class CandidateObserver(Protocol):
    """Observer port for candidate domain events.

    Implementations may log to structlog or record for tests.
    """

    def invocation_started(self, executable: str, amount: int) -> None: ...

    def invocation_completed(
        self,
        executable: str,
        amount: int,
        exit_code: int,
        line_count: int,
        duration_ms: int,
        stderr: str,
    ) -> None: ...

    def invocation_failed(self, executable: str, amount: int, reason: str) -> None: ...
