"""Main Cypher query builder implementation.

This module provides the CypherQueryBuilder class with a fluent interface
for constructing parameterized Cypher queries.

The builder is not thread-safe: every mutating call reads and bumps the
shared parameter counter without locking, so callers must serialize access
to a single instance.
"""

from collections.abc import Mapping
from typing import Any, NamedTuple, cast

from structlog.typing import FilteringBoundLogger

from cypherkit.core.config import settings
from cypherkit.core.errors import MalformedQueryError, QueryErrorDetails
from cypherkit.core.logging import get_logger
from cypherkit.query_builder.interfaces import PatternElement
from cypherkit.query_builder.patterns import set_param_stem
from cypherkit.query_builder.state import ClauseGroup, ClauseType, QueryClauses

logger: FilteringBoundLogger = get_logger(name=__name__)


class BuildResult(NamedTuple):
    """Outcome of ``CypherQueryBuilder.build()``.

    Unpacks as ``query, parameters, error``. On failure ``query`` is empty
    and ``parameters`` is None.
    """

    query: str
    parameters: dict[str, Any] | None
    error: MalformedQueryError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> tuple[str, dict[str, Any]]:
        """Return ``(query, parameters)`` or raise the build error.

        Raises:
            MalformedQueryError: If the build failed
        """
        if self.error is not None:
            raise self.error
        return self.query, cast("dict[str, Any]", self.parameters)


class CypherQueryBuilder:
    """Fluent Cypher query builder.

    Clauses are collected per group and assembled in canonical order
    (MATCH, MERGE, CREATE, SET, DELETE, RETURN) by ``build()``. Literal
    values are kept out of the query text and returned as parameters.

    Once the builder holds an error every mutating method becomes a no-op
    and ``build()`` keeps returning that same error.

    Example:
        ```python
        query, params, error = (
            CypherQueryBuilder()
            .create(node("u", "User").with_properties({"name": "Alice"}))
            .return_clause("u")
            .build()
        )
        ```
    """

    def __init__(self, *, sort_properties: bool | None = None) -> None:
        """Initialize a new Cypher query builder.

        Args:
            sort_properties: Render pattern properties in key order. Defaults
                to ``settings.sort_properties``.
        """
        self.sort_properties: bool = settings.sort_properties if sort_properties is None else sort_properties
        self._clauses = QueryClauses()
        self._parameters: dict[str, Any] = {}
        self._param_counter: int = 0
        self._error: MalformedQueryError | None = None

    @property
    def error(self) -> MalformedQueryError | None:
        """Terminal error, if any."""
        return self._error

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameters registered so far."""
        return self._parameters

    def add_parameter(self, base_name: str, value: Any) -> str:
        """Add a parameter to the query.

        Args:
            base_name: Sanitized name stem
            value: Parameter value to add

        Returns:
            Parameter name to use in the query
        """
        param_name = f"{base_name}_{self._param_counter}"
        self._param_counter += 1
        self._parameters[param_name] = value
        return param_name

    def _is_frozen(self, operation: str) -> bool:
        if self._error is None:
            return False
        logger.debug(
            "Ignoring call on errored query builder",
            operation=operation,
            error_code=self._error.code.value,
        )
        return True

    def _render_pattern(self, elements: tuple[PatternElement, ...]) -> str:
        return "".join(element.render(self) for element in elements)

    def _add_pattern_clause(self, clause_type: ClauseType, elements: tuple[PatternElement, ...]) -> "CypherQueryBuilder":
        if self._is_frozen(clause_type.name.lower()):
            return self

        self._clauses.add(clause_type, self._render_pattern(elements))
        return self

    def match(self, *elements: PatternElement) -> "CypherQueryBuilder":
        """Add a MATCH clause to the query.

        Args:
            *elements: Nodes and relationships, rendered in order

        Returns:
            Self for method chaining

        Example:
            ```python
            query.match(node("u", "User"), rel("", "POSTED").outgoing(), node("p", "Post"))
            ```
        """
        return self._add_pattern_clause(ClauseType.MATCH, elements)

    def optional_match(self, *elements: PatternElement) -> "CypherQueryBuilder":
        """Add an OPTIONAL MATCH clause to the query.

        Args:
            *elements: Nodes and relationships, rendered in order

        Returns:
            Self for method chaining
        """
        return self._add_pattern_clause(ClauseType.OPTIONAL_MATCH, elements)

    def create(self, *elements: PatternElement) -> "CypherQueryBuilder":
        """Add a CREATE clause to the query.

        Args:
            *elements: Nodes and relationships, rendered in order

        Returns:
            Self for method chaining
        """
        return self._add_pattern_clause(ClauseType.CREATE, elements)

    def merge(self, *elements: PatternElement) -> "CypherQueryBuilder":
        """Add a MERGE clause to the query.

        Args:
            *elements: Nodes and relationships, rendered in order

        Returns:
            Self for method chaining
        """
        return self._add_pattern_clause(ClauseType.MERGE, elements)

    def set_properties(self, updates: Mapping[str, Any]) -> "CypherQueryBuilder":
        """Add assignments to the SET clause.

        All assignments across calls are emitted as one ``SET`` line.

        Args:
            updates: Target paths (``u.status``) and their new values

        Returns:
            Self for method chaining

        Example:
            ```python
            query.set_properties({"u.status": "active"})  # SET u.status = $setu_status_0
            ```
        """
        if self._is_frozen("set"):
            return self

        for path, value in updates.items():
            param_name = self.add_parameter(set_param_stem(path), value)
            self._clauses.add(ClauseType.SET, f"{path} = ${param_name}")

        return self

    def delete(self, *aliases: str) -> "CypherQueryBuilder":
        """Add a DELETE clause to the query.

        Args:
            *aliases: Variables to delete

        Returns:
            Self for method chaining
        """
        if self._is_frozen("delete"):
            return self

        self._clauses.add(ClauseType.DELETE, ", ".join(aliases))
        return self

    def detach_delete(self, *aliases: str) -> "CypherQueryBuilder":
        """Add a DETACH DELETE clause to the query.

        Args:
            *aliases: Variables to detach and delete

        Returns:
            Self for method chaining
        """
        if self._is_frozen("detach_delete"):
            return self

        self._clauses.add(ClauseType.DETACH_DELETE, ", ".join(aliases))
        return self

    def return_clause(self, *aliases: str) -> "CypherQueryBuilder":
        """Add items to the RETURN clause.

        Items accumulate across calls and are emitted as one ``RETURN`` line.

        Args:
            *aliases: Items to return

        Returns:
            Self for method chaining

        Example:
            ```python
            query.return_clause("u.name", "p.title")
            ```
        """
        if self._is_frozen("return"):
            return self

        for alias in aliases:
            self._clauses.add(ClauseType.RETURN, alias)
        return self

    def _error_details(self) -> QueryErrorDetails:
        return QueryErrorDetails(
            source="query_builder",
            operation="build",
            match_clauses=self._clauses.count(ClauseGroup.MATCH),
            create_clauses=self._clauses.count(ClauseGroup.CREATE),
            merge_clauses=self._clauses.count(ClauseGroup.MERGE),
            set_items=self._clauses.count(ClauseGroup.SET),
            delete_clauses=self._clauses.count(ClauseGroup.DELETE),
            return_aliases=self._clauses.count(ClauseGroup.RETURN),
        )

    def build(self) -> BuildResult:
        """Build the final Cypher query and parameters.

        The returned parameters are the builder's own dict, not a copy.

        Returns:
            BuildResult of (query, params, error)
        """
        if self._error is not None:
            return BuildResult("", None, self._error)

        if not self._clauses.has_anchor():
            self._error = MalformedQueryError(
                "query must have at least one MATCH, CREATE, or MERGE clause",
                details=self._error_details(),
            )
            logger.log(self._error.level.to_logging_level(), "Query build failed", error=self._error)
            return BuildResult("", None, self._error)

        query = self._clauses.render()

        log = logger.bind(parameter_count=len(self._parameters))
        if settings.log_queries:
            log = log.bind(query=query)
        log.debug("Built Cypher query")

        return BuildResult(query, self._parameters, None)
