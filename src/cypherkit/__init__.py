"""cypherkit: parameterized Cypher query construction."""

from cypherkit.core.errors import MalformedQueryError
from cypherkit.query_builder import (
    BuildResult,
    CypherQueryBuilder,
    NodePattern,
    RelationshipPattern,
    RelDirection,
    node,
    node_ref,
    rel,
)

__all__ = [
    "BuildResult",
    "CypherQueryBuilder",
    "MalformedQueryError",
    "NodePattern",
    "RelDirection",
    "RelationshipPattern",
    "node",
    "node_ref",
    "rel",
]
