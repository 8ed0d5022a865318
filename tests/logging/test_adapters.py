# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for the logging adapters and configure_logging."""

import logging

import pytest
import structlog

from methodwrap.core.config import Config
from methodwrap.logging import configure_logging
from methodwrap.logging.port import LoggingPort
from methodwrap.logging.stdlib_adapter import StdlibLoggingAdapter, _KeyValueLogger
from methodwrap.logging.structlog_adapter import StructlogAdapter


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger("methodwrap.test").setLevel(logging.NOTSET)
    logging.getLogger("methodwrap.intercept").setLevel(logging.NOTSET)


class TestStructlogAdapter:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)

    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"
        assert logging.getLogger("methodwrap.intercept").level == logging.WARNING

    def test_configure_reads_levels_and_format(self):
        adapter = StructlogAdapter()
        config = Config(
            {
                "methodwrap": {
                    "logging": {
                        "format": "json",
                        "level": {"root": "debug", "methodwrap.test": "WARNING"},
                    }
                }
            }
        )
        adapter.configure(config)

        assert adapter._root_level == "DEBUG"
        assert adapter._format == "json"
        assert logging.getLogger("methodwrap.test").level == logging.WARNING

    def test_engine_level_can_be_overridden(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"methodwrap": {"logging": {"level": {"methodwrap.intercept": "debug"}}}}))

        assert logging.getLogger("methodwrap.intercept").level == logging.DEBUG
        assert logging.getLogger("methodwrap.intercept.hook").getEffectiveLevel() == logging.DEBUG

    def test_get_logger_returns_structlog_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter.get_logger("methodwrap.test") is not None


class TestStdlibLoggingAdapter:
    def test_implements_logging_port(self):
        assert isinstance(StdlibLoggingAdapter(), LoggingPort)

    def test_set_level(self):
        adapter = StdlibLoggingAdapter()
        adapter.set_level("methodwrap.test", "error")
        assert logging.getLogger("methodwrap.test").level == logging.ERROR

    def test_configure_quiets_engine_loggers(self):
        adapter = StdlibLoggingAdapter()
        adapter.configure(Config({}))

        assert logging.getLogger("methodwrap.intercept").level == logging.WARNING
        assert not logging.getLogger("methodwrap.intercept.meta").isEnabledFor(logging.DEBUG)

    def test_renders_key_value_pairs(self):
        assert _KeyValueLogger._render("wrapped", {"owner": "Ledger", "operation": "add"}) == (
            "wrapped | owner=Ledger operation=add"
        )
        assert _KeyValueLogger._render("wrapped", {}) == "wrapped"


class TestConfigureLogging:
    def test_defaults_to_structlog(self):
        assert isinstance(configure_logging(Config({})), StructlogAdapter)

    def test_uses_given_adapter(self):
        adapter = StdlibLoggingAdapter()
        assert configure_logging(Config({}), adapter) is adapter
