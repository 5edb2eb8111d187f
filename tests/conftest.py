"""Shared test fixtures for cypherkit."""

import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog

from cypherkit.core.config import settings
from cypherkit.query_builder import CypherQueryBuilder

# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------


class FakeParams:
    """In-memory fake satisfying the ``ParameterManagement`` protocol.

    Mints names the same way the builder does and records every call.
    """

    def __init__(self, sort_properties: bool = False) -> None:
        self.sort_properties = sort_properties
        self.values: dict[str, Any] = {}
        self.calls: list[str] = []

    def add_parameter(self, base_name: str, value: Any) -> str:
        name = f"{base_name}_{len(self.calls)}"
        self.calls.append(base_name)
        self.values[name] = value
        return name


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin settings read at call time, whatever the environment says."""
    monkeypatch.setattr(settings, "sort_properties", False)
    monkeypatch.setattr(settings, "log_queries", False)


@pytest.fixture
def params() -> FakeParams:
    return FakeParams()


@pytest.fixture
def builder() -> CypherQueryBuilder:
    return CypherQueryBuilder()


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Undo any structlog / root logger configuration made by a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
