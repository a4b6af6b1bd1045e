"""
Shared pytest fixtures for weaver tests.

- Resets the service container between tests
- Keeps loggers away from ~/.weaver/weaver.log
- fake_runner / failing_runner: process runners that never spawn configtxgen
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from weaver.core.bootstrap import reset
from weaver.core.exceptions import ProcessExecutionError
from weaver.core.interfaces.logger import ILogger
from weaver.core.interfaces.process import IProcessRunner, ProcessResult


class RecordingRunner(IProcessRunner):
    """Runner that records invocations and optionally fails."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, list[str]]] = []
        self.error = error

    def run(
        self,
        binary: str,
        args: Sequence[str],
        *,
        cwd: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ProcessResult:
        self.calls.append((binary, list(args)))
        if self.error is not None:
            raise self.error
        return ProcessResult(command=[binary, *args], exit_code=0)


@pytest.fixture(autouse=True)
def clean_container(monkeypatch):
    """Fresh container and file logging disabled for every test."""
    monkeypatch.setenv("WEAVER_LOGGING__FILE", "false")
    monkeypatch.delenv("WEAVER_EXECUTION__ON_FAILURE", raising=False)
    reset()
    yield
    reset()


@pytest.fixture
def logger() -> MagicMock:
    """Mock logger for asserting on log calls."""
    return MagicMock(spec=ILogger)


@pytest.fixture
def fake_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def failing_runner() -> RecordingRunner:
    return RecordingRunner(
        error=ProcessExecutionError(
            "Process exited with code 1", exit_code=1, command="configtxgen"
        )
    )
