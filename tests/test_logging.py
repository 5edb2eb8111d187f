"""Unit tests for logging setup and builder log events."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from cypherkit import CypherQueryBuilder, node
from cypherkit.core.config import settings
from cypherkit.core.errors import MalformedQueryError
from cypherkit.core.logging import get_logger, setup_logging
from cypherkit.core.logging.setup import add_error_context


@pytest.mark.usefixtures("reset_structlog")
class TestSetupLogging:
    def test_configures_structlog_and_root_logger(self) -> None:
        setup_logging("debug")

        assert structlog.is_configured()
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_level_defaults_to_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "log_level", "WARNING")
        setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO


def test_add_error_context_flattens_application_errors() -> None:
    error = MalformedQueryError("bad")
    event = add_error_context(None, "warning", {"event": "x", "error": error})

    assert event["error_type"] == "MalformedQueryError"
    assert event["error_code"] == "3003"


def test_add_error_context_leaves_plain_events_alone() -> None:
    assert add_error_context(None, "info", {"event": "x"}) == {"event": "x"}


def test_get_logger_returns_bindable_logger() -> None:
    log = get_logger(__name__)
    assert hasattr(log.bind(key="value"), "info")


class TestBuilderLogEvents:
    def test_failed_build_logs_at_the_errors_level(self) -> None:
        with capture_logs() as logs:
            CypherQueryBuilder().return_clause("u").build()

        assert logs[0]["event"] == "Query build failed"
        assert logs[0]["log_level"] == "warning"
        assert isinstance(logs[0]["error"], MalformedQueryError)

    def test_ignored_call_is_logged(self) -> None:
        builder = CypherQueryBuilder()
        builder.build()

        with capture_logs() as logs:
            builder.match(node("u", "User"))

        assert len(logs) == 1
        assert logs[0]["event"] == "Ignoring call on errored query builder"
        assert logs[0]["operation"] == "match"
        assert logs[0]["error_code"] == "3003"
        assert logs[0]["log_level"] == "debug"

    def test_query_text_only_logged_when_enabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with capture_logs() as logs:
            CypherQueryBuilder().create(node("u", "User")).build()
        assert "query" not in logs[0]

        monkeypatch.setattr(settings, "log_queries", True)
        with capture_logs() as logs:
            CypherQueryBuilder().create(node("u", "User")).build()
        assert logs[0]["query"] == "CREATE (u:User)"
        assert logs[0]["parameter_count"] == 0
