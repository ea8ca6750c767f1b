"""Schema derivation exports."""

from .field_gathering import gather_fields
from .known_types import KnownTypes
from .schema_builder import (
    DerivationContext,
    derive_schema,
    new_derivation_context,
    to_object_schema,
    to_schema,
)
from .schema_nodes import (
    UNKNOWN_ITERABLE_TYPE,
    UNKNOWN_MAP_VALUE_TYPE,
    ArraySchema,
    MapSchema,
    ObjectDefinition,
    ObjectReference,
    PlaceholderSchema,
    PrimitiveSchema,
    SchemaNode,
)
from .schema_registry import EntryState, SchemaRegistry
from .type_classifier import SchemaStrategy, classify

__all__ = [
    "ArraySchema",
    "DerivationContext",
    "EntryState",
    "KnownTypes",
    "MapSchema",
    "ObjectDefinition",
    "ObjectReference",
    "PlaceholderSchema",
    "PrimitiveSchema",
    "SchemaNode",
    "SchemaRegistry",
    "SchemaStrategy",
    "UNKNOWN_ITERABLE_TYPE",
    "UNKNOWN_MAP_VALUE_TYPE",
    "classify",
    "derive_schema",
    "gather_fields",
    "new_derivation_context",
    "to_object_schema",
    "to_schema",
]
