"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    FormParamConfig,
    GenerationConfig,
    InfoSettings,
    OperationConfig,
    OutputSettings,
    RequestBodyConfig,
    ResponseConfig,
)

DEFAULT_OUTPUT_FILENAME = "openapi.yaml"
HTTP_METHODS: tuple[str, ...] = (
    "get",
    "put",
    "post",
    "delete",
    "options",
    "head",
    "patch",
    "trace",
)
OUTPUT_FORMATS: tuple[str, ...] = ("yaml", "json")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GenerationConfig:
    """Load and validate the generation configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    info = _parse_info_section(parsed.get("info"))
    output = _parse_output_section(parsed.get("output"), path.parent)
    operations = _parse_operations_section(parsed.get("operations"))

    return GenerationConfig(path=path, info=info, output=output, operations=operations)


def _parse_info_section(value: Any) -> InfoSettings:
    section = _require_mapping(value, "info")
    title = _require_non_empty_string(section.get("title"), "info.title")
    version = _require_non_empty_string(_stringify(section.get("version")), "info.version")
    description = _optional_string(section.get("description"), "info.description")
    return InfoSettings(title=title, version=version, description=description)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = value or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError("output must be a mapping.")
    raw_path = _optional_string(section.get("path"), "output.path") or DEFAULT_OUTPUT_FILENAME
    output_format = _optional_string(section.get("format"), "output.format")
    if output_format is not None:
        output_format = output_format.lower()
        if output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"output.format must be one of {', '.join(OUTPUT_FORMATS)}."
            )
    return OutputSettings(path=_resolve_path(base_path, raw_path), output_format=output_format)


def _parse_operations_section(value: Any) -> tuple[OperationConfig, ...]:
    if value is None:
        raise ConfigurationError("Configuration section 'operations' is required.")
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("operations must be a list.")
    if not value:
        raise ConfigurationError("operations must contain at least one operation.")

    operations = [
        _parse_operation(item, f"operations[{index}]") for index, item in enumerate(value)
    ]
    seen: set[tuple[str, str]] = set()
    for operation in operations:
        key = (operation.path, operation.method)
        if key in seen:
            raise ConfigurationError(
                f"Duplicate operation: {operation.method.upper()} {operation.path}"
            )
        seen.add(key)
    return tuple(operations)


def _parse_operation(value: Any, label: str) -> OperationConfig:
    section = _require_mapping(value, label)
    path = _require_non_empty_string(section.get("path"), f"{label}.path")
    if not path.startswith("/"):
        raise ConfigurationError(f"{label}.path must start with '/'.")
    method = _require_non_empty_string(section.get("method"), f"{label}.method").lower()
    if method not in HTTP_METHODS:
        raise ConfigurationError(f"{label}.method '{method}' is not an HTTP method.")

    request_body = None
    if section.get("request_body") is not None:
        request_body = _parse_request_body(section["request_body"], f"{label}.request_body")

    return OperationConfig(
        path=path,
        method=method,
        operation_id=_optional_string(section.get("operation_id"), f"{label}.operation_id"),
        summary=_optional_string(section.get("summary"), f"{label}.summary"),
        request_body=request_body,
        form_params=_parse_form_params(section.get("form_params"), f"{label}.form_params"),
        responses=_parse_responses(section.get("responses"), f"{label}.responses"),
    )


def _parse_request_body(value: Any, label: str) -> RequestBodyConfig:
    if isinstance(value, str):
        return RequestBodyConfig(type_ref=_require_non_empty_string(value, label))
    section = _require_mapping(value, label)
    return RequestBodyConfig(
        type_ref=_require_non_empty_string(section.get("type"), f"{label}.type"),
        form=_require_bool(section.get("form", False), f"{label}.form"),
        description=_optional_string(section.get("description"), f"{label}.description"),
    )


def _parse_form_params(value: Any, label: str) -> tuple[FormParamConfig, ...]:
    params: list[FormParamConfig] = []
    for index, item in enumerate(_optional_list(value, label)):
        item_label = f"{label}[{index}]"
        section = _require_mapping(item, item_label)
        params.append(
            FormParamConfig(
                name=_require_non_empty_string(section.get("name"), f"{item_label}.name"),
                type_ref=_require_non_empty_string(section.get("type"), f"{item_label}.type"),
            )
        )
    names = [param.name for param in params]
    if len(names) != len(set(names)):
        raise ConfigurationError(f"{label} contains duplicate parameter names.")
    return tuple(params)


def _parse_responses(value: Any, label: str) -> tuple[ResponseConfig, ...]:
    responses: list[ResponseConfig] = []
    for index, item in enumerate(_optional_list(value, label)):
        item_label = f"{label}[{index}]"
        section = _require_mapping(item, item_label)
        status = _require_non_empty_string(
            _stringify(section.get("status", "200")), f"{item_label}.status"
        )
        description = _optional_string(section.get("description"), f"{item_label}.description")
        media_type = _optional_string(section.get("media_type"), f"{item_label}.media_type")
        responses.append(
            ResponseConfig(
                status=status,
                description=description or "OK",
                type_ref=_optional_string(section.get("type"), f"{item_label}.type"),
                media_type=media_type or "application/json",
            )
        )
    return tuple(responses)


def _stringify(value: Any) -> Any:
    # YAML reads unquoted 1.0 and 200 as numbers.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _optional_list(value: Any, label: str) -> Sequence[Any]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{label} must be a list.")
    return value


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value
