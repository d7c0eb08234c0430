"""Base exception class for all loan-grader-specific errors."""


class GraderError(Exception):
    """Base class for all loan-grader errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
