"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "openapi-config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration template for openapi-type-schema.
# Replace every <REQUIRED> placeholder before running generate.
# Replace <OPTIONAL> placeholders only when your API needs them.
# Type references use "package.module:attribute"; builtins may be named directly (str, int).

info:
  title: "<REQUIRED>"
  version: "<REQUIRED>"
  description: "<OPTIONAL>"

output:
  # Relative paths resolve against this file. A .json suffix selects JSON output.
  path: "openapi.yaml"
  # format: "<OPTIONAL>"  # yaml or json, overrides the suffix

operations:
  - path: "<REQUIRED>"
    method: "<REQUIRED>"
    operation_id: "<OPTIONAL>"
    summary: "<OPTIONAL>"
    request_body:
      type: "<REQUIRED>"
      form: false
      description: "<OPTIONAL>"
    # form_params:
    #   - name: "<OPTIONAL>"
    #     type: "<OPTIONAL>"
    responses:
      - status: "200"
        type: "<OPTIONAL>"
        media_type: "application/json"
        description: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generation configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generation configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
