"""Error types raised by config infrastructure."""

from loan_grader.core.errors import GraderError


class ConfigValidationError(GraderError):
    """Raised when the supplied settings fail validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")
