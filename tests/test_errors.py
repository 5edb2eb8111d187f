"""Unit tests for the error hierarchy."""

import logging

from cypherkit.core import ApplicationError, ErrorCode, ErrorDetails, ErrorLevel
from cypherkit.core.errors import MalformedQueryError, QueryErrorDetails


class TestMalformedQueryError:
    def test_defaults(self) -> None:
        error = MalformedQueryError("no anchor clause")

        assert isinstance(error, ApplicationError)
        assert str(error) == "no anchor clause"
        assert error.code is ErrorCode.MALFORMED_QUERY
        assert error.level is ErrorLevel.WARNING
        assert isinstance(error.details, QueryErrorDetails)
        assert error.details.source == "query_builder"
        assert error.details.operation == "build"

    def test_to_dict_flattens_details(self) -> None:
        details = QueryErrorDetails(source="query_builder", operation="build", return_aliases=2)
        flat = MalformedQueryError("bad", details=details).to_dict()

        assert flat["error_type"] == "MalformedQueryError"
        assert flat["error_code"] == "3003"
        assert flat["error_level"] == "warning"
        assert flat["details.return_aliases"] == 2
        assert isinstance(flat["details.timestamp"], str)

    def test_with_details(self) -> None:
        details = QueryErrorDetails(source="tests", operation="build")
        error = MalformedQueryError.with_details("bad", details)
        assert error.details is details


class TestApplicationError:
    def test_dict_details_are_converted(self) -> None:
        raw = {"source": "patterns", "operation": "render"}
        error = ApplicationError("boom", code=ErrorCode.INVALID_INPUT, details=raw)

        assert isinstance(error.details, ErrorDetails)
        assert error.details.source == "patterns"
        # caller's dict is left alone
        assert raw == {"source": "patterns", "operation": "render"}

    def test_missing_details_default_to_unknown(self) -> None:
        error = ApplicationError("boom", code=ErrorCode.UNKNOWN)
        assert error.details.source == "unknown"
        assert error.level is ErrorLevel.ERROR


def test_error_level_maps_to_logging_levels() -> None:
    assert ErrorLevel.WARNING.to_logging_level() == logging.WARNING
    assert ErrorLevel.CRITICAL.to_logging_level() == logging.CRITICAL
