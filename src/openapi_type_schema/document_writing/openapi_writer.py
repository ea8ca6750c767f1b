"""Serialize an assembled OpenAPI document."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

_LOGGER = logging.getLogger("openapi_type_schema.document_writing")


class DocumentWriteError(Exception):
    """Raised when the generated document cannot be rendered or written."""


def output_format_for(path: Path | str, output_format: str | None = None) -> str:
    """Return the explicit format, else ``json`` for a .json suffix and ``yaml`` otherwise."""
    if output_format is not None:
        return output_format.lower()
    return "json" if Path(path).suffix.lower() == ".json" else "yaml"


def render_document(document: Mapping[str, Any], output_format: str) -> str:
    """Render the document as JSON or YAML text."""
    if output_format == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(
            _plain(document), sort_keys=False, allow_unicode=True, default_flow_style=False
        )
    raise DocumentWriteError(f"Unsupported output format: {output_format}")


def write_document(
    document: Mapping[str, Any], output_path: Path | str, output_format: str | None = None
) -> Path:
    """Write the document and return the resolved destination path."""
    destination = Path(output_path)
    text = render_document(document, output_format_for(destination, output_format))
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise DocumentWriteError(f"Cannot write document to {destination}: {exc}") from exc
    _LOGGER.info("Wrote OpenAPI document to %s", destination.resolve())
    return destination.resolve()


def _plain(value: Any) -> Any:
    # safe_dump only represents builtin dicts and lists.
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
