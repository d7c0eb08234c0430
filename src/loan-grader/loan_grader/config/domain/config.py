"""GraderConfig — the root configuration object for a grading run."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_DATA_FILE = "market.csv"
DEFAULT_TIMEOUT_SECONDS = 30.0


class GraderConfig(BaseModel, frozen=True):
    """Settings for one grading run.

    ``executable`` is kept exactly as given so that ``./candidate`` is not
    normalised into a bare name that would be looked up on PATH.
    """

    executable: str = Field(min_length=1)
    data_file: str = Field(default=DEFAULT_DATA_FILE, min_length=1)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    working_dir: Path | None = None
