"""Tests for structured logging configuration."""

import json
import logging

import pytest
import structlog

from bankacct.config import Settings
from bankacct.domain.value_objects import Switch
from bankacct.exceptions import AccountRequiredError
from bankacct.logging_config import (
    build_processors,
    configure_logging,
    get_logger,
    log_context,
)
from bankacct.services.dispatcher import CommandDispatcher
from bankacct.services.switch_queue import SwitchQueue


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def _drop_file_handlers() -> None:
    package_logger = logging.getLogger("bankacct")
    for handler in list(package_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            handler.flush()
            package_logger.removeHandler(handler)
            handler.close()


class TestBuildProcessors:
    def test_json_ends_with_json_renderer(self) -> None:
        processors = build_processors(_settings(log_format="json"))

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_ends_with_console_renderer(self) -> None:
        processors = build_processors(_settings(log_format="console"))

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_context_is_merged_first(self) -> None:
        processors = build_processors(_settings())

        assert processors[0] is structlog.contextvars.merge_contextvars


class TestConfigureLogging:
    def test_json_format_renders_json(self, caplog) -> None:
        configure_logging(_settings(log_format="json"))

        with caplog.at_level(logging.WARNING, logger="bankacct.tests.json"):
            get_logger("bankacct.tests.json").warning("something_odd", number="A0001")

        [line] = [r.getMessage() for r in caplog.records if "something_odd" in r.getMessage()]
        event = json.loads(line)
        assert event["event"] == "something_odd"
        assert event["number"] == "A0001"
        assert event["level"] == "warning"
        assert event["app"] == "bankacct"

    def test_console_format_keeps_event_name(self, caplog) -> None:
        configure_logging(_settings(log_format="console"))

        with caplog.at_level(logging.WARNING, logger="bankacct.tests.console"):
            get_logger("bankacct.tests.console").warning("plain_event", count=2)

        assert "plain_event" in caplog.text
        assert "count=2" in caplog.text

    def test_debug_setting_lowers_package_level(self) -> None:
        configure_logging(_settings(debug=True))

        assert logging.getLogger("bankacct").level == logging.DEBUG

    def test_log_level_applies_to_package_logger(self) -> None:
        configure_logging(_settings(log_level="error"))

        assert logging.getLogger("bankacct").level == logging.ERROR

    def test_log_file_receives_records(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "bankacct.log"
        configure_logging(_settings(log_file=log_file, log_format="json"))

        try:
            get_logger("bankacct.tests.file").error("written_to_file")
        finally:
            _drop_file_handlers()

        assert "written_to_file" in log_file.read_text(encoding="utf-8")

    def test_log_file_attached_once(self, tmp_path) -> None:
        log_file = tmp_path / "bankacct.log"
        settings = _settings(log_file=log_file)

        try:
            configure_logging(settings)
            configure_logging(settings)
            handlers = [
                h
                for h in logging.getLogger("bankacct").handlers
                if isinstance(h, logging.FileHandler)
            ]
        finally:
            _drop_file_handlers()

        assert len(handlers) == 1


class TestLogContext:
    def test_binds_and_unbinds(self) -> None:
        with log_context(invocation_id="abc123"):
            assert structlog.contextvars.get_contextvars()["invocation_id"] == "abc123"

        assert "invocation_id" not in structlog.contextvars.get_contextvars()

    def test_nested_block_restores_outer_value(self) -> None:
        with log_context(database="outer.txt", invocation_id="abc123"):
            with log_context(database="inner.txt"):
                assert structlog.contextvars.get_contextvars() == {
                    "database": "inner.txt",
                    "invocation_id": "abc123",
                }

            assert structlog.contextvars.get_contextvars() == {
                "database": "outer.txt",
                "invocation_id": "abc123",
            }

    def test_bound_values_reach_rendered_events(self, caplog) -> None:
        configure_logging(_settings(log_format="json"))

        with caplog.at_level(logging.WARNING, logger="bankacct.tests.context"):
            with log_context(database="accounts.txt"):
                get_logger("bankacct.tests.context").warning("inside_block")

        [line] = [r.getMessage() for r in caplog.records if "inside_block" in r.getMessage()]
        assert json.loads(line)["database"] == "accounts.txt"


class TestDispatcherLogging:
    def test_failed_dispatch_logs_warning(self, store, reporting, capsys, caplog) -> None:
        dispatcher = CommandDispatcher(store, reporting)

        with caplog.at_level(logging.WARNING, logger="bankacct.services.dispatcher"):
            with pytest.raises(AccountRequiredError):
                dispatcher.run(SwitchQueue([(Switch.CHANGE_AREA, "999")]))

        # Depending on configuration structlog prints directly or goes through
        # the logging module.
        all_output = capsys.readouterr().out + caplog.text
        assert "dispatch_failed" in all_output
