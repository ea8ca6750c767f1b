"""Assemble a full OpenAPI document from a generation configuration."""

from __future__ import annotations

import builtins
import importlib
from collections.abc import Callable
from typing import Any

from openapi_type_schema.configuration.runtime_settings import GenerationConfig, OperationConfig
from openapi_type_schema.schema_derivation.schema_builder import (
    DerivationContext,
    new_derivation_context,
    to_schema,
)
from openapi_type_schema.type_introspection.descriptor_reader import describe_type
from openapi_type_schema.type_introspection.type_descriptors import TypeDescriptor

from .operation_attachment import add_form_param, add_request_body, add_response
from .operation_models import Operation

OPENAPI_VERSION = "3.0.1"

TypeResolver = Callable[[str], Any]


class TypeReferenceError(Exception):
    """Raised when a configured type reference cannot be imported."""


def resolve_type_reference(reference: str) -> Any:
    """Import ``package.module:attribute``; a bare name resolves against builtins."""
    module_name, separator, attribute_path = reference.partition(":")
    if not separator:
        module_name, attribute_path = "builtins", reference
    if not module_name or not attribute_path:
        raise TypeReferenceError(f"Invalid type reference: {reference!r}")

    target: Any = builtins
    try:
        if module_name != "builtins":
            target = importlib.import_module(module_name)
    except ImportError as exc:
        raise TypeReferenceError(f"Cannot import module for {reference!r}: {exc}") from exc

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise TypeReferenceError(f"Cannot resolve {reference!r}: {exc}") from exc
    return target


def assemble_document(
    configuration: GenerationConfig,
    context: DerivationContext | None = None,
    resolve: TypeResolver = resolve_type_reference,
) -> dict[str, Any]:
    """Derive every configured operation and return the OpenAPI document."""
    derivation = context or new_derivation_context()

    def describe(reference: str) -> TypeDescriptor:
        return describe_type(resolve(reference))

    paths: dict[str, dict[str, Any]] = {}
    for operation_config in configuration.operations:
        operation = build_operation(operation_config, derivation, describe)
        paths.setdefault(operation_config.path, {})[operation_config.method] = (
            operation.to_openapi()
        )

    info: dict[str, Any] = {
        "title": configuration.info.title,
        "version": configuration.info.version,
    }
    if configuration.info.description is not None:
        info["description"] = configuration.info.description

    return {
        "openapi": OPENAPI_VERSION,
        "info": info,
        "paths": paths,
        "components": {"schemas": render_schemas(derivation)},
    }


def build_operation(
    operation_config: OperationConfig,
    context: DerivationContext,
    describe: Callable[[str], TypeDescriptor],
) -> Operation:
    """Build one operation: request body first, then form parameters, then responses."""
    operation = Operation(
        operation_id=operation_config.operation_id,
        summary=operation_config.summary,
    )
    body_config = operation_config.request_body
    if body_config is not None:
        schema = to_schema(describe(body_config.type_ref), context)
        add_request_body(operation, schema, body_config.form, body_config.description)

    for param in operation_config.form_params:
        add_form_param(operation, param.name, to_schema(describe(param.type_ref), context))

    for response in operation_config.responses:
        descriptor = describe(response.type_ref) if response.type_ref is not None else None
        add_response(
            operation,
            response.status,
            descriptor,
            response.media_type,
            response.description,
            context,
        )
    return operation


def render_schemas(context: DerivationContext) -> dict[str, Any]:
    """Render the registry's definitions as ``components.schemas``."""
    return {
        name: definition.to_openapi() for name, definition in context.registry.schemas().items()
    }
