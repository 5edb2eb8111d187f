"""Pattern elements for Cypher queries.

Nodes and relationships render themselves into pattern text. Property
values are never inlined: each one is registered with the builder as a
parameter and referenced as ``$name`` in the fragment.
"""

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

from cypherkit.query_builder.interfaces import ParameterManagement

_PROPERTY_SANITIZER = re.compile(r"[^a-zA-Z0-9]")


def property_param_stem(key: str) -> str:
    """Parameter stem for a pattern property: ``last-seen`` -> ``plastseen``."""
    return "p" + _PROPERTY_SANITIZER.sub("", key)


def set_param_stem(path: str) -> str:
    """Parameter stem for a SET target: ``u.status`` -> ``setu_status``."""
    return "set" + _PROPERTY_SANITIZER.sub("_", path)


class RelDirection(str, Enum):
    """Direction of a relationship pattern."""

    NONE = "--"
    OUTGOING = "-->"
    INCOMING = "<--"

    @property
    def delimiters(self) -> tuple[str, str]:
        """Left and right connectors around the bracketed relationship."""
        if self is RelDirection.OUTGOING:
            return "-", "->"
        if self is RelDirection.INCOMING:
            return "<-", "-"
        return "-", "-"


def _render_properties(
    properties: Mapping[str, Any],
    params: ParameterManagement,
    sort_keys: bool,
) -> str:
    if not properties:
        return ""

    keys = sorted(properties) if sort_keys else list(properties)
    prop_parts: list[str] = []
    for key in keys:
        param_name = params.add_parameter(property_param_stem(key), properties[key])
        prop_parts.append(f"{key}: ${param_name}")

    return f" {{{', '.join(prop_parts)}}}"


class NodePattern:
    """A node in a Cypher pattern, e.g. ``(u:User {name: $pname_0})``.

    An empty label renders a bare alias reference ``(u)``, used to point at a
    node bound by an earlier clause.
    """

    def __init__(
        self,
        alias: str,
        label: str = "",
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        self.alias: str = alias
        self.label: str = label
        self.properties: dict[str, Any] = dict(properties or {})

    def with_properties(self, properties: Mapping[str, Any]) -> "NodePattern":
        """Replace the node's properties.

        Args:
            properties: Property names and literal values

        Returns:
            Self for method chaining
        """
        self.properties = dict(properties)
        return self

    def render(self, params: ParameterManagement) -> str:
        """Render the node, registering its property values in ``params``.

        Args:
            params: Parameter table the values are added to

        Returns:
            Cypher node pattern
        """
        label_str = f":{self.label}" if self.label else ""
        prop_str = _render_properties(self.properties, params, params.sort_properties)
        return f"({self.alias}{label_str}{prop_str})"

    def __repr__(self) -> str:
        return f"NodePattern(alias={self.alias!r}, label={self.label!r}, properties={self.properties!r})"


class RelationshipPattern:
    """A relationship in a Cypher pattern, e.g. ``-[r:KNOWS {since: $psince_1}]->``.

    The alias may be empty for an anonymous relationship.
    """

    def __init__(
        self,
        alias: str = "",
        rel_type: str = "",
        direction: RelDirection = RelDirection.NONE,
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        self.alias: str = alias
        self.rel_type: str = rel_type
        self.direction: RelDirection = direction
        self.properties: dict[str, Any] = dict(properties or {})

    def with_properties(self, properties: Mapping[str, Any]) -> "RelationshipPattern":
        """Replace the relationship's properties.

        Args:
            properties: Property names and literal values

        Returns:
            Self for method chaining
        """
        self.properties = dict(properties)
        return self

    def outgoing(self) -> "RelationshipPattern":
        """Point the relationship left to right: ``-[...]->``."""
        self.direction = RelDirection.OUTGOING
        return self

    def incoming(self) -> "RelationshipPattern":
        """Point the relationship right to left: ``<-[...]-``."""
        self.direction = RelDirection.INCOMING
        return self

    def render(self, params: ParameterManagement) -> str:
        """Render the relationship, registering its property values in ``params``.

        Args:
            params: Parameter table the values are added to

        Returns:
            Cypher relationship pattern including its connectors
        """
        type_str = f":{self.rel_type}" if self.rel_type else ""
        prop_str = _render_properties(self.properties, params, params.sort_properties)
        left, right = self.direction.delimiters
        return f"{left}[{self.alias}{type_str}{prop_str}]{right}"

    def __repr__(self) -> str:
        return (
            f"RelationshipPattern(alias={self.alias!r}, rel_type={self.rel_type!r}, "
            f"direction={self.direction.name}, properties={self.properties!r})"
        )


def node(alias: str, label: str) -> NodePattern:
    """Labeled node, e.g. ``node("u", "User")`` -> ``(u:User)``."""
    return NodePattern(alias=alias, label=label)


def node_ref(alias: str) -> NodePattern:
    """Reference to an already bound node by alias only: ``(u)``."""
    return NodePattern(alias=alias)


def rel(alias: str, rel_type: str) -> RelationshipPattern:
    """Undirected relationship; chain ``.outgoing()`` or ``.incoming()`` to orient it."""
    return RelationshipPattern(alias=alias, rel_type=rel_type)
