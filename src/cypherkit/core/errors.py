"""Specific error types for cypherkit."""

from pydantic import Field

from .base import ApplicationError, ErrorCode, ErrorDetails, ErrorLevel


class QueryErrorDetails(ErrorDetails):
    """Details for query assembly errors"""

    match_clauses: int = Field(0, description="MATCH / OPTIONAL MATCH clauses added")
    create_clauses: int = Field(0, description="CREATE clauses added")
    merge_clauses: int = Field(0, description="MERGE clauses added")
    set_items: int = Field(0, description="SET assignments added")
    delete_clauses: int = Field(0, description="DELETE / DETACH DELETE clauses added")
    return_aliases: int = Field(0, description="RETURN aliases added")


class MalformedQueryError(ApplicationError):
    """The builder cannot produce a query from its current clauses."""

    def __init__(self, message: str, details: QueryErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.MALFORMED_QUERY,
            level=ErrorLevel.WARNING,
            details=details or QueryErrorDetails(
                source="query_builder",
                operation="build",
            )
        )
