"""Type introspection exports."""

from .descriptor_reader import (
    ANY_DESCRIPTOR,
    TypeIntrospectionError,
    declared_fields,
    describe_type,
    superclass_of,
)
from .exclusion_markers import Hidden, JsonIgnore, SchemaExcluded, is_exclusion_marker
from .type_descriptors import FieldDescriptor, TypeDescriptor, TypeKind

__all__ = [
    "ANY_DESCRIPTOR",
    "FieldDescriptor",
    "Hidden",
    "JsonIgnore",
    "SchemaExcluded",
    "TypeDescriptor",
    "TypeIntrospectionError",
    "TypeKind",
    "declared_fields",
    "describe_type",
    "is_exclusion_marker",
    "superclass_of",
]
