"""
Unit tests for the 'weaver configtxgen' and 'weaver genesis-block' commands.
"""

import pytest
from click.testing import CliRunner

from weaver.cli import cli
from weaver.core.bootstrap import bootstrap
from weaver.core.interfaces.process import IProcessRunner
from weaver.core.settings import load_settings


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def container(tmp_path):
    """Bootstrapped container with default settings."""
    return bootstrap(settings=load_settings(start_dir=tmp_path))


class TestConfigtxgenCommand:
    """Tests for 'weaver configtxgen'."""

    def test_dry_run_prints_command(self, runner, container, fake_runner):
        container.register_singleton(IProcessRunner, implementation=fake_runner)

        result = runner.invoke(
            cli,
            ["configtxgen", "--dry-run", "--channel-id", "mychannel", "--profile", "OrgsChannel"],
        )

        assert result.exit_code == 0, result.output
        assert "configtxgen --channelID mychannel --profile OrgsChannel" in result.output
        assert fake_runner.calls == []

    def test_runs_configtxgen(self, runner, container, fake_runner):
        container.register_singleton(IProcessRunner, implementation=fake_runner)

        result = runner.invoke(
            cli,
            [
                "configtxgen",
                "--config-path", "./config",
                "--channel-create-txbase-profile", "SystemChannel",
                "--configtxgen-version",
            ],
        )  # fmt: skip

        assert result.exit_code == 0, result.output
        assert fake_runner.calls == [
            (
                "configtxgen",
                ["--channelCreateTxBaseProfile", "SystemChannel", "--configPath", "./config", "--version"],
            )
        ]
        assert "Command completed successfully!" in result.output

    def test_failure_exits_non_zero_by_default(self, runner, container, failing_runner):
        container.register_singleton(IProcessRunner, implementation=failing_runner)

        result = runner.invoke(cli, ["configtxgen", "--profile", "OrgsChannel"])

        assert result.exit_code == 1
        assert "Command completed successfully!" not in result.output

    def test_raise_policy_reports_error(self, runner, container, failing_runner):
        container.register_singleton(IProcessRunner, implementation=failing_runner)

        result = runner.invoke(cli, ["configtxgen", "--profile", "OrgsChannel", "--on-failure", "raise"])

        assert result.exit_code == 1
        assert "Process exited with code 1" in result.output


class TestGenesisBlockCommand:
    """Tests for 'weaver genesis-block'."""

    def test_requires_options(self, runner, container):
        result = runner.invoke(cli, ["genesis-block", "--profile", "OrgsChannel"])

        assert result.exit_code == 2
        assert "Missing option" in result.output

    def test_creates_genesis_block(self, runner, container, fake_runner):
        container.register_singleton(IProcessRunner, implementation=fake_runner)

        result = runner.invoke(
            cli,
            [
                "genesis-block",
                "--config-path", "./config",
                "--profile", "OrgsChannel",
                "--channel-id", "mychannel",
                "--output-block", "./mychannel.block",
            ],
        )  # fmt: skip

        assert result.exit_code == 0, result.output
        assert "Genesis block written to ./mychannel.block" in result.output
        assert fake_runner.calls[0][1][-2:] == ["--outputBlock", "./mychannel.block"]


def test_group_without_command_shows_help(runner):
    result = runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "configtxgen" in result.output


def test_config_option_selects_policy_and_bin_dir(runner, tmp_path):
    """--config points at a file choosing the raise policy and a bin dir."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    fake = bin_dir / "configtxgen"
    fake.write_text("#!/bin/sh\nexit 5\n")
    fake.chmod(0o755)
    config = tmp_path / "weaver.toml"
    config.write_text(f'[execution]\non_failure = "raise"\nbin_dir = "{bin_dir}"\n')

    result = runner.invoke(cli, ["--config", str(config), "configtxgen", "--profile", "OrgsChannel"])

    assert result.exit_code == 1
    assert "Process exited with code 5" in result.output


def test_broken_config_file_is_reported(runner, tmp_path):
    """A malformed --config file stops the command instead of using defaults."""
    config = tmp_path / "weaver.toml"
    config.write_text('[execution\non_failure = "raise"\n')

    result = runner.invoke(cli, ["--config", str(config), "configtxgen", "--profile", "OrgsChannel"])

    assert result.exit_code == 1
    assert "Failed to parse config file" in result.output
    assert str(config) in result.output
