"""Read type descriptors from Python annotations."""

from __future__ import annotations

import collections.abc
import dataclasses
import inspect
import types
import typing
from typing import Annotated, Any, ClassVar, Generic, Protocol

from .exclusion_markers import is_exclusion_marker
from .type_descriptors import FieldDescriptor, TypeDescriptor, TypeKind

_SCALAR_CLASSES: tuple[type, ...] = (str, int, float, bool, bytes, bytearray, complex, type(None))
_ROOT_CLASSES: tuple[object, ...] = (object, Generic, Protocol)
_UNION_ORIGINS: tuple[object, ...] = (typing.Union, types.UnionType)

ANY_DESCRIPTOR = TypeDescriptor(
    qualified_name="typing.Any",
    simple_name="Any",
    kind=TypeKind.PRIMITIVE,
    origin=Any,
)


class TypeIntrospectionError(Exception):
    """Raised when an annotation cannot be turned into a type descriptor."""


def describe_type(annotation: Any) -> TypeDescriptor:
    """Return the descriptor for a runtime annotation."""
    if annotation is Any or isinstance(annotation, typing.TypeVar):
        return ANY_DESCRIPTOR
    if annotation is None:
        return _describe_class(type(None))
    if isinstance(annotation, (str, typing.ForwardRef)):
        raise TypeIntrospectionError(
            f"Unresolved forward reference {annotation!r}; describe the class that declares it."
        )

    origin = typing.get_origin(annotation)
    if origin is Annotated:
        return describe_type(typing.get_args(annotation)[0])
    if origin in _UNION_ORIGINS:
        return _describe_union(annotation)
    if origin is not None:
        return _describe_generic(annotation, origin)
    if isinstance(annotation, type):
        return _describe_class(annotation)

    supertype = getattr(annotation, "__supertype__", None)
    if supertype is not None:
        return describe_type(supertype)
    raise TypeIntrospectionError(f"Unsupported annotation: {annotation!r}")


def superclass_of(descriptor: TypeDescriptor) -> TypeDescriptor | None:
    """Return the primary base class, or None when it is the universal root."""
    cls = descriptor.origin
    if descriptor.kind is not TypeKind.DECLARED or not isinstance(cls, type):
        return None
    if cls in _ROOT_CLASSES or not cls.__bases__:
        return None
    primary = cls.__bases__[0]
    if primary in _ROOT_CLASSES:
        return None
    return describe_type(primary)


def declared_fields(descriptor: TypeDescriptor) -> list[FieldDescriptor]:
    """Return the attributes the class itself annotates, in declaration order."""
    cls = descriptor.origin
    if descriptor.kind is not TypeKind.DECLARED or not isinstance(cls, type):
        return []

    try:
        own_names = list(inspect.get_annotations(cls))
        hints = typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, AttributeError) as exc:
        raise TypeIntrospectionError(
            f"Cannot resolve annotations of {descriptor.qualified_name}: {exc}"
        ) from exc

    return [_describe_field(name, hints.get(name, Any)) for name in own_names]


def _describe_field(name: str, hint: Any) -> FieldDescriptor:
    excluded = False
    if typing.get_origin(hint) is Annotated:
        excluded = any(is_exclusion_marker(marker) for marker in hint.__metadata__)
        hint = typing.get_args(hint)[0]

    if hint is ClassVar or typing.get_origin(hint) is ClassVar:
        args = typing.get_args(hint)
        return FieldDescriptor(
            name=name,
            type=describe_type(args[0]) if args else ANY_DESCRIPTOR,
            is_static=True,
            is_excluded=excluded,
        )
    if hint is dataclasses.InitVar or isinstance(hint, dataclasses.InitVar):
        inner = getattr(hint, "type", Any)
        return FieldDescriptor(
            name=name,
            type=describe_type(inner),
            is_transient=True,
            is_excluded=excluded,
        )
    return FieldDescriptor(name=name, type=describe_type(hint), is_excluded=excluded)


def _describe_union(annotation: Any) -> TypeDescriptor:
    members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    if len(members) == 1:
        return describe_type(members[0])
    return ANY_DESCRIPTOR


def _describe_generic(annotation: Any, origin: Any) -> TypeDescriptor:
    if origin is collections.abc.Callable or not isinstance(origin, type):
        # Literal, Callable and other special forms carry no object shape.
        return ANY_DESCRIPTOR

    raw_args = typing.get_args(annotation)
    base = _describe_class(origin)
    if not raw_args:
        return base
    if origin is tuple and len(raw_args) == 2 and raw_args[1] is Ellipsis:
        component = describe_type(raw_args[0])
        return dataclasses.replace(
            base,
            qualified_name=f"{base.qualified_name}[{component.qualified_name}, ...]",
            kind=TypeKind.ARRAY,
            component_type=component,
        )

    arguments = tuple(describe_type(arg) for arg in raw_args)
    argument_names = ", ".join(argument.qualified_name for argument in arguments)
    return dataclasses.replace(
        base,
        qualified_name=f"{base.qualified_name}[{argument_names}]",
        type_arguments=arguments,
    )


def _describe_class(cls: type) -> TypeDescriptor:
    scalar_base = next((base for base in cls.__mro__ if base in _SCALAR_CLASSES), None)
    if scalar_base is not None and scalar_base is not cls:
        # str and int subclasses, enums included, document as their scalar base.
        return _describe_class(scalar_base)
    record_like = typing.is_typeddict(cls) or _is_named_tuple(cls)
    return TypeDescriptor(
        qualified_name=f"{cls.__module__}.{cls.__qualname__}",
        simple_name=cls.__name__,
        kind=TypeKind.PRIMITIVE if cls in _SCALAR_CLASSES else TypeKind.DECLARED,
        is_mapping=not record_like and issubclass(cls, collections.abc.Mapping),
        is_iterable=not record_like and issubclass(cls, collections.abc.Iterable),
        origin=cls,
    )


def _is_named_tuple(cls: type) -> bool:
    return issubclass(cls, tuple) and hasattr(cls, "_fields")
