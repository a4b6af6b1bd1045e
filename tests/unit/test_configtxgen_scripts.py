"""
Unit tests for the configtxgen task functions.
"""

import pytest

from weaver.core.exceptions import ProcessExecutionError
from weaver.scripts.configtxgen import (
    configtxgen,
    create_anchor_peers_update,
    create_channel_tx,
    create_genesis_block,
)


class TestTasks:
    """Tests for the task helpers."""

    def test_create_genesis_block(self, logger, fake_runner):
        create_genesis_block(
            "./config", "OrgsChannel", "mychannel", "./mychannel.block",
            logger=logger, runner=fake_runner,
        )  # fmt: skip

        assert fake_runner.calls == [
            (
                "configtxgen",
                [
                    "--configPath", "./config",
                    "--profile", "OrgsChannel",
                    "--channelID", "mychannel",
                    "--outputBlock", "./mychannel.block",
                ],
            )
        ]  # fmt: skip

    def test_create_genesis_block_skips_missing_values(self, logger, fake_runner):
        create_genesis_block(profile="OrgsChannel", logger=logger, runner=fake_runner)

        assert fake_runner.calls == [("configtxgen", ["--profile", "OrgsChannel"])]

    def test_create_channel_tx(self, logger, fake_runner):
        create_channel_tx(
            "./config", "TwoOrgsChannel", "mychannel", "./channel.tx",
            logger=logger, runner=fake_runner,
        )  # fmt: skip

        _, args = fake_runner.calls[0]
        assert args[-2:] == ["--outputCreateChannelTx", "./channel.tx"]

    def test_create_anchor_peers_update(self, logger, fake_runner):
        create_anchor_peers_update(
            "./config", "TwoOrgsChannel", "mychannel", "Org1MSP", "./Org1MSPanchors.tx",
            logger=logger, runner=fake_runner,
        )  # fmt: skip

        _, args = fake_runner.calls[0]
        assert args[-4:] == [
            "--asOrg", "Org1MSP",
            "--outputAnchorPeersUpdate", "./Org1MSPanchors.tx",
        ]  # fmt: skip

    def test_configtxgen_passes_only_given_options(self, logger, fake_runner):
        builder = configtxgen(print_org="Org1MSP", logger=logger, runner=fake_runner)

        assert fake_runner.calls == [("configtxgen", ["--printOrg", "Org1MSP"])]
        assert builder.build() == "configtxgen --printOrg Org1MSP"

    def test_configtxgen_version(self, logger, fake_runner):
        configtxgen(version=True, logger=logger, runner=fake_runner)

        assert fake_runner.calls == [("configtxgen", ["--version"])]

    def test_configtxgen_dry_run_does_not_execute(self, logger, fake_runner):
        builder = configtxgen(channel_id="mychannel", dry_run=True, logger=logger, runner=fake_runner)

        assert fake_runner.calls == []
        assert builder.get_args() == ["--channelID", "mychannel"]

    def test_failure_propagates_with_raise_policy(self, logger, failing_runner):
        with pytest.raises(ProcessExecutionError):
            create_genesis_block(
                profile="OrgsChannel", logger=logger, runner=failing_runner, on_failure="raise"
            )

        logger.error.assert_called_once()
        assert not any("created" in c.args[0] for c in logger.debug.call_args_list)
