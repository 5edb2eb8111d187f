"""Cypher query builder.

This package provides a fluent interface for building parameterized Cypher queries.
"""

from .builder import BuildResult, CypherQueryBuilder
from .interfaces import ParameterManagement, PatternElement
from .patterns import NodePattern, RelationshipPattern, RelDirection, node, node_ref, rel
from .state import ClauseType

__all__ = [
    "BuildResult",
    "ClauseType",
    # Query builder
    "CypherQueryBuilder",
    "NodePattern",
    "ParameterManagement",
    # Patterns
    "PatternElement",
    "RelDirection",
    "RelationshipPattern",
    "node",
    "node_ref",
    "rel",
]
