"""
Process runner and failure handler interfaces.

The runner executes a binary with a discrete argv list; the failure
handler decides what an execution failure means for the host process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a completed child process."""

    command: list[str]
    exit_code: int
    stdout: str | None = None
    stderr: str | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class IProcessRunner(ABC):
    """Runs an external binary and reports how it finished."""

    @abstractmethod
    def run(
        self,
        binary: str,
        args: Sequence[str],
        *,
        cwd: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ProcessResult:
        """
        Run ``binary`` with ``args`` and wait for it to exit.

        Args:
            binary: Executable name or path
            args: Argument tokens, passed as argv elements (never via a shell)
            cwd: Working directory for the child
            env: Extra environment variables merged over the current environment

        Returns:
            ProcessResult of a successful run

        Raises:
            BinaryNotFoundError: If the binary cannot be located
            ProcessExecutionError: If the child exits non-zero or cannot start
        """
        pass


class IFailureHandler(ABC):
    """Decides how an execution failure is surfaced to the caller."""

    name: str = ""

    @abstractmethod
    def handle(self, error: BaseException, command: str) -> NoReturn:
        """
        Handle a failed execution. Never returns normally.

        Args:
            error: The exception raised by the process runner
            command: Display form of the command that failed
        """
        pass
