"""Collect the documented data members of a class and its bases."""

from __future__ import annotations

from openapi_type_schema.type_introspection.descriptor_reader import (
    declared_fields,
    superclass_of,
)
from openapi_type_schema.type_introspection.type_descriptors import (
    FieldDescriptor,
    TypeDescriptor,
)


def gather_fields(descriptor: TypeDescriptor) -> list[FieldDescriptor]:
    """Return documented fields, base-class fields first, in declaration order."""
    gathered: dict[str, FieldDescriptor] = {}
    _gather_into(gathered, descriptor)
    return list(gathered.values())


def _gather_into(gathered: dict[str, FieldDescriptor], descriptor: TypeDescriptor) -> None:
    superclass = superclass_of(descriptor)
    if superclass is not None:
        _gather_into(gathered, superclass)

    for field in declared_fields(descriptor):
        if field.ignorable:
            # A subclass can hide an attribute its base documents.
            gathered.pop(field.name, None)
            continue
        gathered[field.name] = field
