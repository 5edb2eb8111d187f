"""Clause bookkeeping for the Cypher query builder.

Clauses are collected per group and emitted in a fixed order at build time,
whatever order the builder methods were called in.
"""

from enum import Enum, auto
from typing import ClassVar


class ClauseType(Enum):
    """Enum for Cypher clause types."""

    MATCH = auto()
    OPTIONAL_MATCH = auto()
    CREATE = auto()
    MERGE = auto()
    SET = auto()
    DELETE = auto()
    DETACH_DELETE = auto()
    RETURN = auto()

    @property
    def keyword(self) -> str:
        """Cypher keyword that starts the clause."""
        return self.name.replace("_", " ")


class ClauseGroup(Enum):
    """Group a clause is collected in."""

    MATCH = "match"
    MERGE = "merge"
    CREATE = "create"
    SET = "set"
    DELETE = "delete"
    RETURN = "return"


class QueryClauses:
    """Collected clause text, grouped for canonical assembly."""

    # Emission order used by build(); SET and RETURN are single joined lines
    ASSEMBLY_ORDER: ClassVar[tuple[ClauseGroup, ...]] = (
        ClauseGroup.MATCH,
        ClauseGroup.MERGE,
        ClauseGroup.CREATE,
        ClauseGroup.SET,
        ClauseGroup.DELETE,
        ClauseGroup.RETURN,
    )

    # At least one of these must be present to build
    ANCHOR_GROUPS: ClassVar[frozenset[ClauseGroup]] = frozenset(
        {ClauseGroup.MATCH, ClauseGroup.CREATE, ClauseGroup.MERGE}
    )

    _GROUP_OF: ClassVar[dict[ClauseType, ClauseGroup]] = {
        ClauseType.MATCH: ClauseGroup.MATCH,
        ClauseType.OPTIONAL_MATCH: ClauseGroup.MATCH,
        ClauseType.CREATE: ClauseGroup.CREATE,
        ClauseType.MERGE: ClauseGroup.MERGE,
        ClauseType.SET: ClauseGroup.SET,
        ClauseType.DELETE: ClauseGroup.DELETE,
        ClauseType.DETACH_DELETE: ClauseGroup.DELETE,
        ClauseType.RETURN: ClauseGroup.RETURN,
    }

    def __init__(self) -> None:
        """Initialize empty clause groups."""
        self._groups: dict[ClauseGroup, list[str]] = {group: [] for group in ClauseGroup}

    @classmethod
    def group_of(cls, clause_type: ClauseType) -> ClauseGroup:
        """Group that collects clauses of ``clause_type``."""
        return cls._GROUP_OF[clause_type]

    def add(self, clause_type: ClauseType, body: str) -> None:
        """Record a clause.

        For SET and RETURN ``body`` is a single item (assignment or alias)
        that is joined with the others at render time. For every other
        clause type it is the clause body, prefixed here with its keyword.

        Args:
            clause_type: The type of clause being added
            body: Rendered clause body
        """
        group = self.group_of(clause_type)
        if group in (ClauseGroup.SET, ClauseGroup.RETURN):
            self._groups[group].append(body)
        else:
            self._groups[group].append(f"{clause_type.keyword} {body}")

    def count(self, group: ClauseGroup) -> int:
        """Number of entries collected in ``group``."""
        return len(self._groups[group])

    def has_anchor(self) -> bool:
        """Whether any MATCH, CREATE or MERGE clause was added."""
        return any(self._groups[group] for group in self.ANCHOR_GROUPS)

    def render(self) -> str:
        """Join all groups in canonical order."""
        lines: list[str] = []
        for group in self.ASSEMBLY_ORDER:
            entries = self._groups[group]
            if not entries:
                continue
            if group is ClauseGroup.SET:
                lines.append(f"{ClauseType.SET.keyword} {', '.join(entries)}")
            elif group is ClauseGroup.RETURN:
                lines.append(f"{ClauseType.RETURN.keyword} {', '.join(entries)}")
            else:
                lines.extend(entries)
        return "\n".join(lines).strip()
