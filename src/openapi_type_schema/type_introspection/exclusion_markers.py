"""Markers that exclude an annotated attribute from derived schemas.

Attach a marker through ``typing.Annotated``::

    class Account:
        login: str
        password: Annotated[str, Hidden]
        audit_trail: Annotated[list[str], JsonIgnore()]
"""

from __future__ import annotations


class SchemaExcluded:
    """Capability shared by every documentation-exclusion marker."""


class Hidden(SchemaExcluded):
    """Hide the attribute from generated API documentation."""


class JsonIgnore(SchemaExcluded):
    """The attribute is never serialized, so it is never documented."""


def is_exclusion_marker(marker: object) -> bool:
    """Return True for a marker class or marker instance."""
    if isinstance(marker, type):
        return issubclass(marker, SchemaExcluded)
    return isinstance(marker, SchemaExcluded)
