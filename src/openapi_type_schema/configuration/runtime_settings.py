"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class InfoSettings:
    """OpenAPI ``info`` block."""

    title: str
    version: str
    description: str | None = None


@dataclass(frozen=True)
class OutputSettings:
    """Where and how the generated document is written."""

    path: Path
    output_format: str | None = None


@dataclass(frozen=True)
class RequestBodyConfig:
    """Type documented as an operation's request body."""

    type_ref: str
    form: bool = False
    description: str | None = None


@dataclass(frozen=True)
class FormParamConfig:
    """One form-encoded request parameter."""

    name: str
    type_ref: str


@dataclass(frozen=True)
class ResponseConfig:
    """One documented response; a missing type documents an empty body."""

    status: str
    description: str
    type_ref: str | None = None
    media_type: str = "application/json"


@dataclass(frozen=True)
class OperationConfig:  # pylint: disable=too-many-instance-attributes
    """One documented HTTP operation."""

    path: str
    method: str
    operation_id: str | None
    summary: str | None
    request_body: RequestBodyConfig | None
    form_params: tuple[FormParamConfig, ...]
    responses: tuple[ResponseConfig, ...]


@dataclass(frozen=True)
class GenerationConfig:
    """Top-level configuration aggregate."""

    path: Path
    info: InfoSettings
    output: OutputSettings
    operations: tuple[OperationConfig, ...]
