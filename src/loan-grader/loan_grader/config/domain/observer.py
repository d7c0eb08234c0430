"""Observer port for the config domain."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(
        self, executable: str, data_file: str, timeout_seconds: float
    ) -> None: ...
