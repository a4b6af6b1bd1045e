"""
Command builder for Hyperledger Fabric's configtxgen tool.

configtxgen produces genesis blocks, channel creation transactions and
anchor peer updates from a configtx.yaml. The builder accumulates options
through chainable setters, serializes them into argv tokens and hands the
binary plus tokens to a process runner.

Usage:
    ConfigtxgenCommandBuilder()
        .set_config_path("./config")
        .set_profile("OrgsChannel")
        .set_channel_id("mychannel")
        .set_output_block("./channel-artifacts/mychannel.block")
        .execute()
"""

from __future__ import annotations

import os
from typing import Any

from ...core.exceptions import ProcessExecutionError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.process import IFailureHandler, IProcessRunner
from ...utils.parsers import map_parser
from ..constants import FabricBinaries
from ..failure import get_failure_handler
from ..options import OptionValue, to_option_value

PathArg = str | os.PathLike[str]


class ConfigtxgenCommandBuilder:
    """
    Fluent builder for ``configtxgen`` invocations.

    Setters given None are no-ops, so optional upstream values can be
    passed straight through. Re-setting an option overwrites its value but
    keeps its original position in the emitted arguments.
    """

    def __init__(
        self,
        logger: ILogger | None = None,
        runner: IProcessRunner | None = None,
        on_failure: IFailureHandler | str | None = None,
    ) -> None:
        """
        Args:
            logger: Logger to use (defaults to one scoped to this class)
            runner: Process runner (defaults to the registered runner)
            on_failure: Failure handler or policy name ('exit' or 'raise');
                defaults to settings ``execution.on_failure``
        """
        self._logger = logger
        self._runner = runner
        if isinstance(on_failure, str):
            on_failure = get_failure_handler(on_failure)
        self._failure_handler = on_failure
        self._bin_name = FabricBinaries.CONFIGTXGEN
        self._args: dict[str, OptionValue] = {}

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ...services.logging import get_logger

            self._logger = get_logger(type(self).__name__)
        return self._logger

    @property
    def runner(self) -> IProcessRunner:
        if self._runner is None:
            from ...core.di import resolve_or_default
            from ...services.process import SubprocessRunner

            self._runner = resolve_or_default(IProcessRunner, SubprocessRunner)  # type: ignore[type-abstract]
        return self._runner

    @property
    def failure_handler(self) -> IFailureHandler:
        if self._failure_handler is None:
            from ...core.di import resolve_or_default
            from ...core.settings import WeaverSettings

            settings = resolve_or_default(WeaverSettings, WeaverSettings)
            self._failure_handler = get_failure_handler(
                settings.execution.on_failure,
                exit_code=settings.execution.exit_code,
            )
        return self._failure_handler

    def set_option(self, name: str, value: Any) -> ConfigtxgenCommandBuilder:
        """
        Set an arbitrary configtxgen option.

        bool values become flags, lists of strings are comma-joined and
        everything else is emitted as ``--name value``. None is ignored.
        """
        if value is None:
            return self
        self._args[name] = to_option_value(value, name)
        self.logger.debug("Setting %s to %s", name, value)
        return self

    def set_as_org(self, org: str | None = None) -> ConfigtxgenCommandBuilder:
        """Organization to act as when generating an anchor peers update."""
        return self.set_option("asOrg", org)

    def set_channel_create_tx_base_profile(
        self, profile: str | None = None
    ) -> ConfigtxgenCommandBuilder:
        """Orderer system channel profile used as the base of a channel creation tx."""
        return self.set_option("channelCreateTxBaseProfile", profile)

    def set_channel_id(self, channel_id: str | None = None) -> ConfigtxgenCommandBuilder:
        return self.set_option("channelID", channel_id)

    def set_config_path(self, path: PathArg | None = None) -> ConfigtxgenCommandBuilder:
        """Directory containing configtx.yaml."""
        return self.set_option("configPath", path)

    def set_inspect_block(self, path: PathArg | None = None) -> ConfigtxgenCommandBuilder:
        return self.set_option("inspectBlock", path)

    def set_inspect_channel_create_tx(
        self, path: PathArg | None = None
    ) -> ConfigtxgenCommandBuilder:
        return self.set_option("inspectChannelCreateTx", path)

    def set_output_anchor_peers_update(
        self, path: PathArg | None = None
    ) -> ConfigtxgenCommandBuilder:
        return self.set_option("outputAnchorPeersUpdate", path)

    def set_output_block(self, path: PathArg | None = None) -> ConfigtxgenCommandBuilder:
        """Where to write the genesis block."""
        return self.set_option("outputBlock", path)

    def set_output_create_channel_tx(
        self, path: PathArg | None = None
    ) -> ConfigtxgenCommandBuilder:
        return self.set_option("outputCreateChannelTx", path)

    def set_print_org(self, org: str | None = None) -> ConfigtxgenCommandBuilder:
        """Print the definition of an organization as JSON."""
        return self.set_option("printOrg", org)

    def set_profile(self, profile: str | None = None) -> ConfigtxgenCommandBuilder:
        """Profile from configtx.yaml to use for generation."""
        return self.set_option("profile", profile)

    def set_version(self, show: bool = False) -> ConfigtxgenCommandBuilder:
        """Toggle ``--version``. Unlike other setters this always stores a value."""
        return self.set_option("version", bool(show))

    def get_binary(self) -> str:
        return self._bin_name.value

    def get_args(self) -> list[str]:
        """Serialize the options into argv tokens in the order they were first set."""
        return map_parser(self._args)

    def build(self) -> str:
        """Return the full command line for display. Not used for execution."""
        command_line = " ".join([self.get_binary(), *self.get_args()])
        self.logger.debug("Built command: %s", command_line)
        return command_line

    def execute(self) -> None:
        """
        Run configtxgen and wait for it to exit.

        On failure one error is logged and the failure handler takes over:
        it either exits the process or raises ProcessExecutionError.
        """
        binary = self.get_binary()
        args = self.get_args()

        command = " ".join([binary, *args])

        try:
            result = self.runner.run(binary, args)
            if result is not None and not result.ok:
                raise ProcessExecutionError(
                    f"Process exited with code {result.exit_code}",
                    exit_code=result.exit_code,
                    command=command,
                )
        except Exception as e:
            self.logger.error("Failed to execute the command: %s", e)
            self.failure_handler.handle(e, command)
