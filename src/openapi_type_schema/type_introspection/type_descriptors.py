"""Type introspection entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(str, Enum):
    """Structural kind of a described type."""

    PRIMITIVE = "primitive"
    ARRAY = "array"
    DECLARED = "declared"


@dataclass(frozen=True)
class TypeDescriptor:  # pylint: disable=too-many-instance-attributes
    """Host type as seen by schema derivation."""

    qualified_name: str
    simple_name: str
    kind: TypeKind
    type_arguments: tuple[TypeDescriptor, ...] = ()
    component_type: TypeDescriptor | None = None
    is_mapping: bool = False
    is_iterable: bool = False
    origin: object = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared data member of a class."""

    name: str
    type: TypeDescriptor
    is_static: bool = False
    is_transient: bool = False
    is_excluded: bool = False

    @property
    def ignorable(self) -> bool:
        """Return True when the field must not appear in any schema."""
        return self.is_static or self.is_transient or self.is_excluded
