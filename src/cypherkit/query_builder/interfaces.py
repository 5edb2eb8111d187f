"""Query builder interfaces.

These protocols decouple pattern elements from the concrete builder: an
element only needs somewhere to register its literal values.
"""

from typing import Any, Protocol, runtime_checkable


class ParameterManagement(Protocol):
    """Protocol for query parameter management."""

    # Render pattern properties in key order instead of insertion order
    sort_properties: bool

    def add_parameter(self, base_name: str, value: Any) -> str:
        """Add a parameter to the query.

        Args:
            base_name: Sanitized name stem, e.g. ``pname`` or ``setu_status``
            value: The parameter value to add

        Returns:
            Parameter name to use in the query (without the ``$``)
        """
        ...


@runtime_checkable
class PatternElement(Protocol):
    """Anything that can be drawn into a MATCH / CREATE / MERGE pattern."""

    def render(self, params: ParameterManagement) -> str:
        """Render the element, registering its properties in ``params``."""
        ...
