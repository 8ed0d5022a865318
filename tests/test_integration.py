"""End-to-end tests — configuration, logging and interception together."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from methodwrap import (
    Config,
    Intercepted,
    InterceptionSettings,
    after_each,
    before_each,
    configure_logging,
    state_of,
)
from methodwrap.logging.stdlib_adapter import StdlibLoggingAdapter


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestSpecScenarios:
    def test_add_between_log_start_and_log_end(self) -> None:
        events: list[str] = []

        class Ledger(Intercepted, before="log_start", after="log_end"):
            def log_start(self) -> None:
                events.append("log_start")

            def log_end(self) -> None:
                events.append("log_end")

            def add(self, a: int, b: int) -> int:
                events.append(f"add({a},{b})")
                return a + b

        assert Ledger().add(2, 3) == 5
        assert events == ["log_start", "add(2,3)", "log_end"]

    def test_outer_calls_inner(self) -> None:
        events: list[str] = []

        class Job(Intercepted):
            @before_each
            def b(self) -> None:
                events.append("b")

            @after_each
            def a(self) -> None:
                events.append("a")

            def outer(self) -> None:
                events.append("outer-body-start")
                self.inner()
                events.append("outer-body-end")

            def inner(self) -> None:
                events.append("inner-body")

        Job().outer()

        assert events == ["b", "outer-body-start", "inner-body", "outer-body-end", "a"]
        assert events.count("b") == 1
        assert events.count("a") == 1


class TestConfiguredInterception:
    def test_settings_loaded_from_file_drive_failure_policy(self, tmp_path: Path) -> None:
        config_file = tmp_path / "methodwrap.yaml"
        config_file.write_text("methodwrap:\n  intercept:\n    after-on-failure: true\n")
        settings = InterceptionSettings.from_config(Config.from_file(config_file))
        events: list[str] = []

        class Transfer(Intercepted, after="release", settings=settings):
            def release(self) -> None:
                events.append("release")

            def move(self) -> None:
                raise LookupError("no such account")

        with pytest.raises(LookupError):
            Transfer().move()

        assert events == ["release"]
        assert state_of(Transfer).tracker.depth == 0

    def test_engine_debug_records_reach_configured_logging(self) -> None:
        configure_logging(
            Config({"methodwrap": {"logging": {"level": {"root": "INFO", "methodwrap.intercept": "DEBUG"}}}}),
            StdlibLoggingAdapter(),
        )
        engine_logger = logging.getLogger("methodwrap.intercept")
        handler = _ListHandler()
        engine_logger.addHandler(handler)
        try:

            class Audited(Intercepted):
                def work(self) -> None: ...

            messages = [record.getMessage() for record in handler.records]
            assert any("Audited.work" in message for message in messages)
        finally:
            engine_logger.removeHandler(handler)
            engine_logger.setLevel(logging.NOTSET)
