"""Tests for config loading and validation."""

from pathlib import Path

import pytest

from loan_grader.config.infrastructure.errors import ConfigValidationError
from loan_grader.config.infrastructure.loader import load_config
from tests.config.fake_observer import FakeConfigObserver


class TestValidConfigLoading:
    def test_defaults_are_applied(self) -> None:
        cfg = load_config(observer=FakeConfigObserver(), executable="./candidate")

        assert cfg.executable == "./candidate"
        assert cfg.data_file == "market.csv"
        assert cfg.timeout_seconds == 30.0
        assert cfg.working_dir is None

    def test_executable_is_not_normalised(self) -> None:
        cfg = load_config(observer=FakeConfigObserver(), executable="./bin/../candidate")

        assert cfg.executable == "./bin/../candidate"

    def test_overrides_are_applied(self, tmp_path: Path) -> None:
        cfg = load_config(
            observer=FakeConfigObserver(),
            executable="candidate",
            data_file="other.csv",
            timeout_seconds=2.5,
            working_dir=tmp_path,
        )

        assert cfg.data_file == "other.csv"
        assert cfg.timeout_seconds == 2.5
        assert cfg.working_dir == tmp_path

    def test_emits_config_loaded_event(self) -> None:
        observer = FakeConfigObserver()

        load_config(observer=observer, executable="./candidate", timeout_seconds=5)

        assert observer.loaded == [
            {
                "executable": "./candidate",
                "data_file": "market.csv",
                "timeout_seconds": "5.0",
            }
        ]


class TestInvalidConfig:
    def test_zero_timeout_raises(self) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(
                observer=FakeConfigObserver(),
                executable="./candidate",
                timeout_seconds=0,
            )

    def test_negative_timeout_raises(self) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(
                observer=FakeConfigObserver(),
                executable="./candidate",
                timeout_seconds=-1,
            )

    def test_empty_executable_raises(self) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(observer=FakeConfigObserver(), executable="")

    def test_empty_data_file_raises(self) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(
                observer=FakeConfigObserver(), executable="./candidate", data_file=""
            )

    def test_no_event_on_failure(self) -> None:
        observer = FakeConfigObserver()
        with pytest.raises(ConfigValidationError):
            load_config(observer=observer, executable="")

        assert observer.loaded == []
