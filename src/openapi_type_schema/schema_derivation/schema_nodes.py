"""Schema node entities and their OpenAPI rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

COMPONENTS_SCHEMAS_PREFIX = "#/components/schemas/"
UNKNOWN_ITERABLE_TYPE = "unknownIterableType"
UNKNOWN_MAP_VALUE_TYPE = "unknownMapValueType"


@dataclass(frozen=True)
class PrimitiveSchema:
    """Terminal scalar schema."""

    type: str
    format: str | None = None

    def to_openapi(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {"type": self.type}
        if self.format is not None:
            rendered["format"] = self.format
        return rendered


@dataclass(frozen=True)
class PlaceholderSchema:
    """Object schema emitted when a needed generic argument is missing."""

    marker: str

    def to_openapi(self) -> dict[str, Any]:
        return {"type": "object", "format": self.marker}


@dataclass(frozen=True)
class ArraySchema:
    """Homogeneous sequence of items."""

    items: SchemaNode

    def to_openapi(self) -> dict[str, Any]:
        return {"type": "array", "items": self.items.to_openapi()}


@dataclass(frozen=True)
class MapSchema:
    """String-keyed mapping; only the value schema is modeled."""

    additional_values: SchemaNode

    def to_openapi(self) -> dict[str, Any]:
        return {"type": "object", "additionalProperties": self.additional_values.to_openapi()}


@dataclass(frozen=True)
class ObjectReference:
    """Pointer to a named definition held in the schema registry."""

    name: str

    @property
    def ref(self) -> str:
        return f"{COMPONENTS_SCHEMAS_PREFIX}{self.name}"

    def to_openapi(self) -> dict[str, Any]:
        return {"$ref": self.ref}


@dataclass
class ObjectDefinition:
    """Object schema with ordered properties.

    Named definitions live in the schema registry and are only ever handed out
    as ``ObjectReference``. Unnamed definitions back form-encoded request
    bodies, where each form parameter is added to the same instance.
    """

    name: str | None = None
    properties: dict[str, SchemaNode] = field(default_factory=dict)

    def add_property(self, name: str, schema: SchemaNode) -> None:
        self.properties[name] = schema

    def to_openapi(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {name: node.to_openapi() for name, node in self.properties.items()},
        }


SchemaNode = (
    PrimitiveSchema
    | PlaceholderSchema
    | ArraySchema
    | MapSchema
    | ObjectReference
    | ObjectDefinition
)
