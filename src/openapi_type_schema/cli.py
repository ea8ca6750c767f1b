"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from openapi_type_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from openapi_type_schema.document_writing import (
    DocumentWriteError,
    render_document,
    write_document,
)
from openapi_type_schema.operation_documents import (
    TypeReferenceError,
    assemble_document,
    render_schemas,
    resolve_type_reference,
)
from openapi_type_schema.schema_derivation import derive_schema, new_derivation_context
from openapi_type_schema.type_introspection import TypeIntrospectionError

_FORMAT_CHOICE = click.Choice(["yaml", "json"], case_sensitive=False)
_VERBOSE_HANDLER_NAME = "openapi_type_schema.verbose"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-type-schema")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log derivation details.")
def cli(verbose: bool) -> None:
    """Derive OpenAPI documents from Python type annotations."""
    if verbose:
        _configure_verbose_logging()


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generation configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON generation configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Override the configured output document path",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=_FORMAT_CHOICE,
    help="Override the output format (default: from the output path suffix)",
)
def generate(config_path: str, output_path: str | None, output_format: str | None) -> None:
    """Generate the OpenAPI document for the configured operations."""
    try:
        configuration = load_configuration(config_path)
        document = assemble_document(configuration)
        destination = write_document(
            document,
            output_path or configuration.output.path,
            output_format or configuration.output.output_format,
        )
    except (
        ConfigurationError,
        TypeReferenceError,
        TypeIntrospectionError,
        DocumentWriteError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination))


@cli.command(name="show-schema")
@click.argument("type_ref")
@click.option(
    "--format",
    "output_format",
    required=False,
    default="yaml",
    show_default=True,
    type=_FORMAT_CHOICE,
    help="Output format",
)
def show_schema(type_ref: str, output_format: str) -> None:
    """Print the schema derived for TYPE_REF (package.module:attribute)."""
    context = new_derivation_context()
    try:
        schema = derive_schema(resolve_type_reference(type_ref), context)
    except (TypeReferenceError, TypeIntrospectionError) as exc:
        raise CliError(str(exc)) from exc
    document = {
        "schema": schema.to_openapi(),
        "components": {"schemas": render_schemas(context)},
    }
    click.echo(render_document(document, output_format.lower()), nl=False)


def _configure_verbose_logging() -> None:
    package_logger = logging.getLogger("openapi_type_schema")
    package_logger.setLevel(logging.DEBUG)
    if any(handler.get_name() == _VERBOSE_HANDLER_NAME for handler in package_logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_VERBOSE_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
