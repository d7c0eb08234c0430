"""Structlog implementation of the CandidateObserver port."""

import structlog


class StructlogCandidateObserver:
    """Delegates candidate domain events to structlog.

    Satisfies the CandidateObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def invocation_started(self, executable: str, amount: int) -> None:
        self._log.debug(
            "candidate.invocation.started",
            executable=executable,
            amount=amount,
        )

    def invocation_completed(
        self,
        executable: str,
        amount: int,
        exit_code: int,
        line_count: int,
        duration_ms: int,
        stderr: str,
    ) -> None:
        self._log.info(
            "candidate.invocation.completed",
            executable=executable,
            amount=amount,
            exit_code=exit_code,
            line_count=line_count,
            duration_ms=duration_ms,
        )
        if stderr:
            self._log.debug(
                "candidate.invocation.stderr",
                executable=executable,
                amount=amount,
                stderr=stderr,
            )

    def invocation_failed(self, executable: str, amount: int, reason: str) -> None:
        self._log.error(
            "candidate.invocation.failed",
            executable=executable,
            amount=amount,
            reason=reason,
        )
