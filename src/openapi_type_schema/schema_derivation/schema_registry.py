"""Deduplicating store of named object definitions for one generation run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from openapi_type_schema.type_introspection.type_descriptors import TypeDescriptor

from .schema_nodes import ObjectDefinition

_LOGGER = logging.getLogger("openapi_type_schema.schema_derivation.registry")


class EntryState(str, Enum):
    """Lifecycle of a registry entry."""

    DERIVING = "deriving"
    DEFINED = "defined"


@dataclass
class RegistryEntry:
    """Registry slot for one fully-qualified type."""

    name: str
    state: EntryState
    definition: ObjectDefinition | None = None


class SchemaRegistry:
    """Maps fully-qualified type names to emitted schema names and definitions.

    An entry is reserved before the type's fields are derived, so a type that
    refers back to itself resolves to the in-progress name. Distinct types
    sharing a simple name get a numbered suffix instead of replacing each
    other.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._taken_names: set[str] = set()

    def lookup(self, descriptor: TypeDescriptor) -> str | None:
        entry = self._entries.get(descriptor.qualified_name)
        return entry.name if entry is not None else None

    def state_of(self, descriptor: TypeDescriptor) -> EntryState | None:
        entry = self._entries.get(descriptor.qualified_name)
        return entry.state if entry is not None else None

    def reserve(self, descriptor: TypeDescriptor) -> str:
        """Record the type as being derived and return its emitted name."""
        existing = self._entries.get(descriptor.qualified_name)
        if existing is not None:
            return existing.name

        name = self._free_name(descriptor.simple_name)
        if name != descriptor.simple_name:
            _LOGGER.warning(
                "Schema name %s is already used; emitting %s as %s",
                descriptor.simple_name,
                descriptor.qualified_name,
                name,
            )
        self._taken_names.add(name)
        self._entries[descriptor.qualified_name] = RegistryEntry(
            name=name, state=EntryState.DERIVING
        )
        return name

    def define(self, descriptor: TypeDescriptor, definition: ObjectDefinition) -> None:
        """Store the finished definition of a reserved type."""
        self.reserve(descriptor)
        entry = self._entries[descriptor.qualified_name]
        if entry.state is EntryState.DEFINED:
            return
        definition.name = entry.name
        entry.definition = definition
        entry.state = EntryState.DEFINED
        _LOGGER.debug("Registered schema %s for %s", entry.name, descriptor.qualified_name)

    def schemas(self) -> dict[str, ObjectDefinition]:
        """Return the defined schemas sorted by emitted name."""
        defined = {
            entry.name: entry.definition
            for entry in self._entries.values()
            if entry.definition is not None
        }
        return dict(sorted(defined.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def _free_name(self, simple_name: str) -> str:
        if simple_name not in self._taken_names:
            return simple_name
        suffix = 2
        while f"{simple_name}_{suffix}" in self._taken_names:
            suffix += 1
        return f"{simple_name}_{suffix}"
