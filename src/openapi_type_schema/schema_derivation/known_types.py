"""Lookup table from native scalar types to schema primitives."""

from __future__ import annotations

from .schema_nodes import PrimitiveSchema

_DEFAULT_PRIMITIVES: tuple[tuple[str, str, str | None], ...] = (
    ("builtins.str", "string", None),
    ("builtins.int", "integer", "int64"),
    ("builtins.bool", "boolean", None),
    ("builtins.float", "number", "double"),
    ("builtins.complex", "string", None),
    ("builtins.bytes", "string", "byte"),
    ("builtins.bytearray", "string", "byte"),
    ("builtins.object", "object", None),
    ("builtins.NoneType", "object", None),
    ("typing.Any", "object", None),
    ("decimal.Decimal", "number", None),
    ("datetime.datetime", "string", "date-time"),
    ("datetime.date", "string", "date"),
    ("datetime.time", "string", "time"),
    ("datetime.timedelta", "string", "duration"),
    ("uuid.UUID", "string", "uuid"),
    ("pathlib.Path", "string", None),
    ("pathlib.PurePath", "string", None),
    ("pathlib.PosixPath", "string", None),
    ("pathlib.WindowsPath", "string", None),
)


class KnownTypes:
    """Exact-name primitive lookup consulted before any structural check."""

    def __init__(self) -> None:
        self._primitives: dict[str, PrimitiveSchema] = {
            name: PrimitiveSchema(type=schema_type, format=schema_format)
            for name, schema_type, schema_format in _DEFAULT_PRIMITIVES
        }

    def register(
        self, qualified_name: str, schema_type: str, schema_format: str | None = None
    ) -> None:
        """Map another native type name to a primitive schema."""
        self._primitives[qualified_name] = PrimitiveSchema(type=schema_type, format=schema_format)

    def create_schema(self, qualified_name: str) -> PrimitiveSchema | None:
        return self._primitives.get(qualified_name)

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._primitives
