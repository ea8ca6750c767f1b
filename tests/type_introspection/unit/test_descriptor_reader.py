"""Type descriptor reader tests."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import InitVar, dataclass
from datetime import datetime
from typing import (
    Annotated,
    Any,
    ClassVar,
    Literal,
    NamedTuple,
    NewType,
    Optional,
    TypedDict,
    TypeVar,
)

import pytest
from openapi_type_schema.type_introspection import (
    ANY_DESCRIPTOR,
    Hidden,
    JsonIgnore,
    TypeIntrospectionError,
    TypeKind,
    declared_fields,
    describe_type,
    superclass_of,
)

UserId = NewType("UserId", int)
T = TypeVar("T")


class Item:
    sku: str


class Base:
    id: int


class Derived(Base):
    label: str


@dataclass
class Credentials:
    login: str
    password: Annotated[str, Hidden]
    session: Annotated[str, JsonIgnore()]
    salt: InitVar[str]
    realm: ClassVar[str] = "default"


class Point(NamedTuple):
    x: float
    y: float


class Movie(TypedDict):
    title: str
    year: int


def test_describes_builtin_scalar_as_primitive_kind() -> None:
    descriptor = describe_type(str)

    assert descriptor.qualified_name == "builtins.str"
    assert descriptor.simple_name == "str"
    assert descriptor.kind is TypeKind.PRIMITIVE
    assert descriptor.is_iterable is True
    assert descriptor.is_mapping is False


def test_describes_declared_class_with_module_qualified_name() -> None:
    descriptor = describe_type(Item)

    assert descriptor.qualified_name == f"{Item.__module__}.Item"
    assert descriptor.simple_name == "Item"
    assert descriptor.kind is TypeKind.DECLARED
    assert descriptor.type_arguments == ()
    assert descriptor.is_iterable is False


def test_describes_generic_collections_with_type_arguments() -> None:
    listed = describe_type(list[Item])
    mapped = describe_type(dict[str, Item])
    abstract = describe_type(Mapping[str, int])

    assert listed.qualified_name == f"builtins.list[{Item.__module__}.Item]"
    assert listed.type_arguments == (describe_type(Item),)
    assert listed.is_iterable is True
    assert mapped.is_mapping is True
    assert [argument.simple_name for argument in mapped.type_arguments] == ["str", "Item"]
    assert abstract.is_mapping is True
    assert describe_type(Sequence[int]).is_iterable is True


def test_variadic_tuple_is_native_array_kind() -> None:
    descriptor = describe_type(tuple[Item, ...])

    assert descriptor.kind is TypeKind.ARRAY
    assert descriptor.component_type == describe_type(Item)
    assert descriptor.qualified_name == f"builtins.tuple[{Item.__module__}.Item, ...]"
    assert describe_type(tuple[int, str]).kind is TypeKind.DECLARED


@pytest.mark.parametrize(
    "annotation",
    [Optional[Item], Item | None, Annotated[Item, "metadata"], Annotated[Item | None, Hidden]],
)
def test_wrappers_unwrap_to_the_underlying_class(annotation: Any) -> None:
    assert describe_type(annotation) == describe_type(Item)


@pytest.mark.parametrize("annotation", [Any, T, int | str, Callable[[int], str], Literal["a"]])
def test_unshaped_annotations_degrade_to_any(annotation: Any) -> None:
    assert describe_type(annotation) == ANY_DESCRIPTOR


def test_new_type_describes_its_supertype() -> None:
    assert describe_type(UserId) == describe_type(int)


def test_none_is_a_primitive_kind() -> None:
    descriptor = describe_type(None)

    assert descriptor == describe_type(type(None))
    assert descriptor.qualified_name == "builtins.NoneType"
    assert descriptor.kind is TypeKind.PRIMITIVE


def test_records_are_neither_mappings_nor_iterables() -> None:
    assert describe_type(Point).is_iterable is False
    assert describe_type(Movie).is_mapping is False
    assert describe_type(Movie).is_iterable is False


def test_unresolved_string_annotation_raises() -> None:
    with pytest.raises(TypeIntrospectionError, match="forward reference"):
        describe_type("Item")


def test_unsupported_annotation_raises() -> None:
    with pytest.raises(TypeIntrospectionError, match="Unsupported annotation"):
        describe_type(42)


def test_superclass_stops_at_universal_root() -> None:
    assert superclass_of(describe_type(Derived)) == describe_type(Base)
    assert superclass_of(describe_type(Base)) is None
    assert superclass_of(describe_type(list[int])) is None
    assert superclass_of(describe_type(str)) is None


def test_declared_fields_are_own_attributes_in_declaration_order() -> None:
    assert [field.name for field in declared_fields(describe_type(Derived))] == ["label"]
    assert [field.name for field in declared_fields(describe_type(Point))] == ["x", "y"]


def test_declared_fields_flag_static_transient_and_excluded_members() -> None:
    fields = {field.name: field for field in declared_fields(describe_type(Credentials))}

    assert list(fields) == ["login", "password", "session", "salt", "realm"]
    assert fields["login"].ignorable is False
    assert fields["login"].type == describe_type(str)
    assert fields["password"].is_excluded is True
    assert fields["session"].is_excluded is True
    assert fields["salt"].is_transient is True
    assert fields["salt"].type == describe_type(str)
    assert fields["realm"].is_static is True
    assert all(fields[name].ignorable for name in ("password", "session", "salt", "realm"))


def test_field_types_resolve_string_annotations() -> None:
    class_fields = declared_fields(describe_type(Stamped))

    assert [field.type.qualified_name for field in class_fields] == [
        "datetime.datetime",
        f"builtins.list[{Item.__module__}.Item]",
    ]


def test_non_class_descriptors_have_no_fields() -> None:
    assert declared_fields(describe_type(str)) == []
    assert declared_fields(ANY_DESCRIPTOR) == []


class Stamped:
    at: datetime
    items: list[Item]
