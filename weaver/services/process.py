"""
Process runner for Fabric binaries.

Runs a binary with a discrete argv list (no shell), waits for it to exit
and converts failures into weaver exceptions.
"""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from ..core.exceptions import BinaryNotFoundError, ProcessExecutionError, ProcessTimeoutError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.process import IProcessRunner, ProcessResult


class SubprocessRunner(IProcessRunner):
    """
    Runs binaries with subprocess.run.

    Output is inherited from the parent by default so configtxgen's own
    progress lines reach the terminal. With ``capture_output=True`` stdout
    and stderr are collected and attached to the result (or the error).
    """

    def __init__(
        self,
        bin_dir: Path | str | None = None,
        timeout: float | None = None,
        capture_output: bool = False,
        logger: ILogger | None = None,
    ) -> None:
        self._bin_dir = Path(bin_dir) if bin_dir else None
        self._timeout = timeout
        self._capture_output = capture_output
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving a scoped logger lazily."""
        if self._logger is None:
            from .logging import get_logger

            self._logger = get_logger(type(self).__name__)
        return self._logger

    def resolve_binary(self, binary: str) -> str:
        """
        Locate ``binary``, preferring the configured bin directory over PATH.

        Raises:
            BinaryNotFoundError: If the binary cannot be found
        """
        if os.sep in binary:
            if os.access(binary, os.X_OK):
                return binary
            raise BinaryNotFoundError(f"Binary not executable: {binary}", binary=binary)

        search_path = os.environ.get("PATH", "")
        if self._bin_dir is not None:
            search_path = os.pathsep.join([str(self._bin_dir), search_path])

        found = shutil.which(binary, path=search_path)
        if found is None:
            raise BinaryNotFoundError(
                f"Could not find '{binary}'. Install the Fabric binaries or set execution.bin_dir.",
                binary=binary,
                search_path=str(self._bin_dir) if self._bin_dir else None,
            )
        return found

    def run(
        self,
        binary: str,
        args: Sequence[str],
        *,
        cwd: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ProcessResult:
        command_str = " ".join([binary, *args])
        self.logger.info("Running command: %s", command_str)

        executable = self.resolve_binary(binary)
        argv = [executable, *args]

        child_env = None
        if env:
            child_env = {**os.environ, **env}

        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                env=child_env,
                timeout=self._timeout,
                capture_output=self._capture_output,
                text=True,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessTimeoutError(
                f"Process timed out after {self._timeout}s",
                timeout=self._timeout,
                command=shlex.join(argv),
                cause=e,
            ) from e
        except OSError as e:
            raise ProcessExecutionError(
                f"Failed to start process: {e}",
                command=shlex.join(argv),
                cause=e,
            ) from e

        if completed.returncode != 0:
            context: dict[str, str] = {}
            if completed.stdout:
                context["stdout"] = completed.stdout.strip()
            if completed.stderr:
                context["stderr"] = completed.stderr.strip()
            raise ProcessExecutionError(
                f"Process exited with code {completed.returncode}",
                exit_code=completed.returncode,
                command=shlex.join(argv),
                context=context,
            )

        self.logger.debug("Command finished: %s", command_str)
        return ProcessResult(
            command=argv,
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
