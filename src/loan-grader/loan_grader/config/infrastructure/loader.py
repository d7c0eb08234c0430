"""Config loader — validates raw option values and emits observer events."""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from loan_grader.config.domain.config import GraderConfig
from loan_grader.config.domain.observer import ConfigObserver
from loan_grader.config.infrastructure.errors import ConfigValidationError


def load_config(
    observer: ConfigObserver,
    executable: str,
    data_file: str | None = None,
    timeout_seconds: float | None = None,
    working_dir: Path | None = None,
) -> GraderConfig:
    """Validate and return a GraderConfig.

    Options left as None fall back to the model defaults.

    Raises:
        ConfigValidationError: if any value violates the schema.
    """
    raw: dict[str, Any] = {
        "executable": executable,
        "data_file": data_file,
        "timeout_seconds": timeout_seconds,
        "working_dir": working_dir,
    }
    cfg = _build_config(raw={k: v for k, v in raw.items() if v is not None})
    observer.config_loaded(
        executable=cfg.executable,
        data_file=cfg.data_file,
        timeout_seconds=cfg.timeout_seconds,
    )
    return cfg


def _build_config(raw: dict[str, Any]) -> GraderConfig:
    try:
        return GraderConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
