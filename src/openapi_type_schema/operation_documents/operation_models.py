"""Operation document entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from openapi_type_schema.schema_derivation.schema_nodes import SchemaNode

APP_FORM = "application/x-www-form-urlencoded"
APP_JSON = "application/json"


@dataclass
class MediaType:
    """One schema under a MIME type key."""

    schema: SchemaNode

    def to_openapi(self) -> dict[str, Any]:
        return {"schema": self.schema.to_openapi()}


Content = dict[str, MediaType]


def render_content(content: Content) -> dict[str, Any]:
    return {mime: media_type.to_openapi() for mime, media_type in content.items()}


@dataclass
class RequestBody:
    """Request body of one operation."""

    content: Content = field(default_factory=dict)
    description: str | None = None
    required: bool = True

    def to_openapi(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {}
        if self.description is not None:
            rendered["description"] = self.description
        rendered["content"] = render_content(self.content)
        rendered["required"] = self.required
        return rendered


@dataclass
class ApiResponse:
    """Response entry for one status code."""

    description: str
    content: Content = field(default_factory=dict)

    def to_openapi(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {"description": self.description}
        if self.content:
            rendered["content"] = render_content(self.content)
        return rendered


@dataclass
class Operation:
    """Documented HTTP operation."""

    operation_id: str | None = None
    summary: str | None = None
    request_body: RequestBody | None = None
    responses: dict[str, ApiResponse] = field(default_factory=dict)

    def to_openapi(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {}
        if self.operation_id is not None:
            rendered["operationId"] = self.operation_id
        if self.summary is not None:
            rendered["summary"] = self.summary
        if self.request_body is not None:
            rendered["requestBody"] = self.request_body.to_openapi()
        responses = self.responses or {"200": ApiResponse(description="OK")}
        rendered["responses"] = {
            status: response.to_openapi() for status, response in responses.items()
        }
        return rendered
