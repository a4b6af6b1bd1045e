"""
Unit tests for SubprocessRunner.

Runs the current Python interpreter and small shell scripts as stand-ins
for Fabric binaries.
"""

import os
import stat
import sys

import pytest

from weaver.core.exceptions import BinaryNotFoundError, ProcessExecutionError, ProcessTimeoutError
from weaver.services.logging import NullLogger
from weaver.services.process import SubprocessRunner


@pytest.fixture
def fake_configtxgen(tmp_path):
    """Executable named configtxgen that echoes its arguments."""
    script = tmp_path / "configtxgen"
    script.write_text('#!/bin/sh\necho "args: $*"\n')
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


class TestSubprocessRunner:
    """Tests for running binaries."""

    def test_successful_run_returns_result(self):
        runner = SubprocessRunner(capture_output=True, logger=NullLogger())

        result = runner.run(sys.executable, ["-c", "print('hello')"])

        assert result.ok
        assert result.exit_code == 0
        assert result.stdout.strip() == "hello"

    def test_non_zero_exit_raises_with_code(self):
        runner = SubprocessRunner(capture_output=True, logger=NullLogger())

        with pytest.raises(ProcessExecutionError) as exc_info:
            runner.run(sys.executable, ["-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"])

        assert exc_info.value.returncode == 3
        assert exc_info.value.context["stderr"] == "boom"

    def test_unknown_binary_raises_not_found(self):
        runner = SubprocessRunner(logger=NullLogger())

        with pytest.raises(BinaryNotFoundError):
            runner.run("definitely-not-a-fabric-binary", [])

    def test_bin_dir_is_searched(self, fake_configtxgen):
        runner = SubprocessRunner(bin_dir=fake_configtxgen.parent, capture_output=True, logger=NullLogger())

        assert runner.resolve_binary("configtxgen") == str(fake_configtxgen)
        result = runner.run("configtxgen", ["--channelID", "mychannel"])

        assert result.stdout.strip() == "args: --channelID mychannel"

    def test_tokens_are_not_shell_split(self):
        runner = SubprocessRunner(capture_output=True, logger=NullLogger())

        result = runner.run(
            sys.executable, ["-c", "import sys; print(len(sys.argv))", "a b", "c;d"]
        )

        assert result.stdout.strip() == "3"

    def test_env_is_merged_over_current_environment(self, monkeypatch):
        monkeypatch.setenv("WEAVER_TEST_BASE", "base")
        runner = SubprocessRunner(capture_output=True, logger=NullLogger())

        result = runner.run(
            sys.executable,
            ["-c", "import os; print(os.environ['WEAVER_TEST_BASE'], os.environ['FABRIC_CFG_PATH'])"],
            env={"FABRIC_CFG_PATH": "/etc/hyperledger/fabric"},
        )

        assert result.stdout.strip() == "base /etc/hyperledger/fabric"

    def test_timeout_raises(self):
        runner = SubprocessRunner(timeout=0.2, capture_output=True, logger=NullLogger())

        with pytest.raises(ProcessTimeoutError):
            runner.run(sys.executable, ["-c", "import time; time.sleep(5)"])

    def test_non_executable_path_rejected(self, tmp_path):
        path = tmp_path / "configtxgen"
        path.write_text("not executable")
        os.chmod(path, 0o644)

        with pytest.raises(BinaryNotFoundError):
            SubprocessRunner(logger=NullLogger()).resolve_binary(str(path))
