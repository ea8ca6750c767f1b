"""Attach derived schemas to operation request bodies and responses."""

from __future__ import annotations

from openapi_type_schema.schema_derivation.schema_builder import DerivationContext, to_schema
from openapi_type_schema.schema_derivation.schema_nodes import ObjectDefinition, SchemaNode
from openapi_type_schema.type_introspection.type_descriptors import TypeDescriptor

from .operation_models import (
    APP_FORM,
    APP_JSON,
    ApiResponse,
    Content,
    MediaType,
    Operation,
    RequestBody,
)


def create_content(
    descriptor: TypeDescriptor, media_type: str, context: DerivationContext
) -> Content:
    """Return content holding the type's schema under one media type."""
    return {media_type: MediaType(schema=to_schema(descriptor, context))}


def add_request_body(
    operation: Operation, schema: SchemaNode, as_form: bool, description: str | None
) -> None:
    """Attach the schema as the operation's form-encoded or JSON request body."""
    body = _request_body(operation)
    body.description = description
    mime = APP_FORM if as_form else APP_JSON
    body.content[mime] = MediaType(schema=schema)


def add_form_param(operation: Operation, name: str, schema: SchemaNode) -> None:
    """Add one property to the operation's shared form-body object schema."""
    form_schema = _form_param_schema(_request_body(operation))
    form_schema.add_property(name, schema)


def add_response(  # pylint: disable=too-many-arguments
    operation: Operation,
    status: str,
    descriptor: TypeDescriptor | None,
    media_type: str,
    description: str,
    context: DerivationContext,
) -> None:
    """Attach a response; a None descriptor documents a response without a body."""
    content = create_content(descriptor, media_type, context) if descriptor is not None else {}
    operation.responses[status] = ApiResponse(description=description, content=content)


def _form_param_schema(body: RequestBody) -> ObjectDefinition:
    """Return the form object schema owned by the body, creating it on first use.

    The operation owns exactly one form object; every form parameter mutates
    that same instance.
    """
    media_type = body.content.get(APP_FORM)
    if media_type is not None and isinstance(media_type.schema, ObjectDefinition):
        return media_type.schema

    schema = ObjectDefinition()
    body.content[APP_FORM] = MediaType(schema=schema)
    return schema


def _request_body(operation: Operation) -> RequestBody:
    if operation.request_body is None:
        operation.request_body = RequestBody(required=True)
    return operation.request_body
