"""Operation document exports."""

from .document_assembly import (
    OPENAPI_VERSION,
    TypeReferenceError,
    assemble_document,
    build_operation,
    render_schemas,
    resolve_type_reference,
)
from .operation_attachment import add_form_param, add_request_body, add_response, create_content
from .operation_models import (
    APP_FORM,
    APP_JSON,
    ApiResponse,
    Content,
    MediaType,
    Operation,
    RequestBody,
)

__all__ = [
    "APP_FORM",
    "APP_JSON",
    "ApiResponse",
    "Content",
    "MediaType",
    "OPENAPI_VERSION",
    "Operation",
    "RequestBody",
    "TypeReferenceError",
    "add_form_param",
    "add_request_body",
    "add_response",
    "assemble_document",
    "build_operation",
    "create_content",
    "render_schemas",
    "resolve_type_reference",
]
