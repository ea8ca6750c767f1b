"""Recursive derivation of schema nodes from type descriptors."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from openapi_type_schema.type_introspection.descriptor_reader import describe_type
from openapi_type_schema.type_introspection.type_descriptors import TypeDescriptor

from .field_gathering import gather_fields
from .known_types import KnownTypes
from .schema_nodes import (
    UNKNOWN_ITERABLE_TYPE,
    UNKNOWN_MAP_VALUE_TYPE,
    ArraySchema,
    MapSchema,
    ObjectDefinition,
    ObjectReference,
    PlaceholderSchema,
    SchemaNode,
)
from .schema_registry import SchemaRegistry
from .type_classifier import SchemaStrategy, classify

_LOGGER = logging.getLogger("openapi_type_schema.schema_derivation.builder")


@dataclass
class DerivationContext:
    """State shared by every recursive call of one generation run."""

    registry: SchemaRegistry = field(default_factory=SchemaRegistry)
    known_types: KnownTypes = field(default_factory=KnownTypes)


def new_derivation_context() -> DerivationContext:
    """Create a context with an empty registry and the default primitive table."""
    return DerivationContext()


def derive_schema(annotation: Any, context: DerivationContext) -> SchemaNode:
    """Derive the schema of a runtime annotation such as ``list[Order]``."""
    return to_schema(describe_type(annotation), context)


def to_schema(descriptor: TypeDescriptor, context: DerivationContext) -> SchemaNode:
    """Derive the schema node for a type, registering object definitions on the way."""
    strategy = classify(descriptor, context.known_types)
    if strategy is SchemaStrategy.PRIMITIVE:
        primitive = context.known_types.create_schema(descriptor.qualified_name)
        assert primitive is not None
        return primitive
    if strategy is SchemaStrategy.MAP:
        return _build_map_schema(descriptor, context)
    if strategy is SchemaStrategy.ARRAY:
        return _build_array_schema(descriptor, context)
    if strategy is SchemaStrategy.ITERABLE:
        return _build_iterable_schema(descriptor, context)
    return to_object_schema(descriptor, context)


def to_object_schema(descriptor: TypeDescriptor, context: DerivationContext) -> ObjectReference:
    """Return a reference to the type's definition, deriving it on first use."""
    registry = context.registry
    existing = registry.lookup(descriptor)
    if existing is not None:
        return ObjectReference(name=existing)

    name = registry.reserve(descriptor)
    definition = ObjectDefinition(name=name)
    for field_descriptor in gather_fields(descriptor):
        definition.add_property(field_descriptor.name, to_schema(field_descriptor.type, context))
    registry.define(descriptor, definition)
    return ObjectReference(name=name)


def _build_iterable_schema(descriptor: TypeDescriptor, context: DerivationContext) -> ArraySchema:
    if len(descriptor.type_arguments) == 1:
        return ArraySchema(items=to_schema(descriptor.type_arguments[0], context))
    _LOGGER.debug("No single element type for %s", descriptor.qualified_name)
    return ArraySchema(items=PlaceholderSchema(marker=UNKNOWN_ITERABLE_TYPE))


def _build_array_schema(descriptor: TypeDescriptor, context: DerivationContext) -> ArraySchema:
    assert descriptor.component_type is not None
    return ArraySchema(items=to_schema(descriptor.component_type, context))


def _build_map_schema(descriptor: TypeDescriptor, context: DerivationContext) -> MapSchema:
    if len(descriptor.type_arguments) == 2:
        return MapSchema(additional_values=to_schema(descriptor.type_arguments[1], context))
    _LOGGER.debug("No key/value type arguments for %s", descriptor.qualified_name)
    return MapSchema(additional_values=PlaceholderSchema(marker=UNKNOWN_MAP_VALUE_TYPE))
