"""Choose the schema-building strategy for a type descriptor."""

from __future__ import annotations

from enum import Enum

from openapi_type_schema.type_introspection.type_descriptors import TypeDescriptor, TypeKind

from .known_types import KnownTypes


class SchemaStrategy(str, Enum):
    """Schema-building strategies, in the order they are tried."""

    PRIMITIVE = "primitive"
    MAP = "map"
    ARRAY = "array"
    ITERABLE = "iterable"
    OBJECT = "object"


def classify(descriptor: TypeDescriptor, known_types: KnownTypes) -> SchemaStrategy:
    """Return the first strategy whose check the descriptor satisfies.

    Map is tested before iterable because mappings are iterable too. Any
    type that matches nothing else is derived as an object, possibly with
    no properties.
    """
    if descriptor.qualified_name in known_types:
        return SchemaStrategy.PRIMITIVE
    if descriptor.is_mapping:
        return SchemaStrategy.MAP
    if descriptor.kind is TypeKind.ARRAY:
        return SchemaStrategy.ARRAY
    if descriptor.is_iterable:
        return SchemaStrategy.ITERABLE
    return SchemaStrategy.OBJECT
