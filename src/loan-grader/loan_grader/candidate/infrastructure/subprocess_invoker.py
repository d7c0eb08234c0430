"""SubprocessCandidateInvoker — runs the candidate as an OS process."""

import os
import re
import signal
import subprocess
import time
from pathlib import Path

from loan_grader.candidate.domain.observer import CandidateObserver
from loan_grader.candidate.infrastructure.errors import (
    CandidateLaunchError,
    CandidateTimeoutError,
)

# Seconds allowed for draining pipes once the process group has been killed.
_DRAIN_SECONDS = 2.0

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split on \\n, \\r and \\r\\n only; a final line break adds no empty line."""
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _kill_process_group(process: subprocess.Popen[bytes]) -> None:
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        # The whole group has already exited.
        pass


class SubprocessCandidateInvoker:
    """Invokes ``<executable> <data_file> <amount>`` and captures its stdout.

    One process per call, started in its own session. The invoker blocks until
    the process exits or the timeout expires; on expiry the whole process group
    is killed, so wrapper scripts cannot leave a child holding the pipes, and
    CandidateTimeoutError is raised. The exit code is reported to the observer
    but is never used to decide anything.

    Satisfies the CandidateInvoker protocol structurally.
    """

    def __init__(
        self,
        executable: str,
        data_file: str,
        timeout_seconds: float,
        observer: CandidateObserver,
        working_dir: Path | None = None,
    ) -> None:
        self._executable = executable
        self._data_file = data_file
        self._timeout_seconds = timeout_seconds
        self._observer = observer
        self._working_dir = working_dir

    def invoke(self, amount: int) -> list[str]:
        """Run the candidate for *amount* and return every stdout line.

        Raises:
            CandidateLaunchError: if the process cannot be started or read.
            CandidateTimeoutError: if the process outlives the timeout.
        """
        command = [self._command_path(), self._data_file, str(amount)]
        self._observer.invocation_started(executable=self._executable, amount=amount)
        started_at = time.monotonic()

        try:
            with subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                cwd=self._working_dir,
                start_new_session=True,
            ) as process:
                try:
                    stdout, stderr = process.communicate(timeout=self._timeout_seconds)
                except subprocess.TimeoutExpired as exc:
                    _kill_process_group(process)
                    try:
                        process.communicate(timeout=_DRAIN_SECONDS)
                    except subprocess.TimeoutExpired:
                        # A descendant left the group and still holds the pipes.
                        pass
                    self._observer.invocation_failed(
                        executable=self._executable,
                        amount=amount,
                        reason=f"timed out after {self._timeout_seconds}s",
                    )
                    raise CandidateTimeoutError(
                        executable=self._executable,
                        amount=amount,
                        timeout_seconds=self._timeout_seconds,
                    ) from exc
        except OSError as exc:
            self._observer.invocation_failed(
                executable=self._executable,
                amount=amount,
                reason=str(exc),
            )
            raise CandidateLaunchError(
                executable=self._executable, reason=str(exc)
            ) from exc

        lines = split_lines(stdout.decode("utf-8", errors="replace"))
        self._observer.invocation_completed(
            executable=self._executable,
            amount=amount,
            exit_code=process.returncode,
            line_count=len(lines),
            duration_ms=int((time.monotonic() - started_at) * 1000),
            stderr=stderr.decode("utf-8", errors="replace").strip(),
        )
        return lines

    def _command_path(self) -> str:
        """Return the executable path as seen from the candidate's working dir.

        A relative path containing a separator is anchored to the grader's own
        working directory; bare names are left for PATH lookup.
        """
        if (
            self._working_dir is not None
            and os.sep in self._executable
            and not os.path.isabs(self._executable)
        ):
            return os.path.abspath(self._executable)
        return self._executable
