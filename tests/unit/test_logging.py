"""
Unit tests for weaver's logger implementations.
"""

import logging

from weaver.core.bootstrap import bootstrap
from weaver.core.settings import load_settings
from weaver.fabric.configtxgen import ConfigtxgenCommandBuilder
from weaver.services.logging import NullLogger, ScopedLogger, WeaverLogger, get_logger


class TestWeaverLogger:
    """Tests for WeaverLogger and scoped child loggers."""

    def test_child_logger_is_named_after_scope(self):
        parent = WeaverLogger(name="weaver-test", file_enabled=False)

        child = parent.child("ConfigtxgenCommandBuilder")

        assert isinstance(child, ScopedLogger)
        assert child.name == "weaver-test.ConfigtxgenCommandBuilder"

    def test_child_messages_reach_parent_handlers(self):
        parent = WeaverLogger(name="weaver-test-propagation", file_enabled=False)
        records: list[logging.LogRecord] = []

        class _Collect(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(record)

        logging.getLogger("weaver-test-propagation").addHandler(_Collect())
        parent.child("Builder").debug("Setting %s to %s", "profile", "OrgsChannel")

        assert [r.getMessage() for r in records] == ["Setting profile to OrgsChannel"]
        assert records[0].name == "weaver-test-propagation.Builder"

    def test_get_logger_without_bootstrap_is_null(self):
        assert isinstance(get_logger("anything"), NullLogger)

    def test_builder_default_logger_is_scoped(self, tmp_path):
        bootstrap(settings=load_settings(start_dir=tmp_path))

        builder = ConfigtxgenCommandBuilder(on_failure="raise")

        assert builder.logger.name == "weaver.ConfigtxgenCommandBuilder"
