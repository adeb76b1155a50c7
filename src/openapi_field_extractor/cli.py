"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from openapi_field_extractor.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from openapi_field_extractor.run_execution import (
    ExtractionError,
    ExtractionRequest,
    execute_field_extraction,
    load_configured_document,
)
from openapi_field_extractor.tabular_export import ExportFormat


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML configuration file with the document registry",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-field-extractor")
def cli() -> None:
    """List the leaf fields of API response schemas as flat tables."""


@cli.command(name="extract")
@click.argument("document")
@_CONFIG_OPTION
@click.option(
    "--format",
    "export_format",
    type=click.Choice([item.value for item in ExportFormat]),
    default=ExportFormat.CSV.value,
    show_default=True,
    help="Output format",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="File to write; delimited output goes to stdout when omitted",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
def extract(
    document: str,
    config_path: str | None,
    export_format: str,
    output_path: str | None,
    verbose: bool,
) -> None:
    """Extract one row per leaf response field of DOCUMENT (registered name, URL or path)."""
    _configure_logging(verbose)
    try:
        outcome = execute_field_extraction(
            ExtractionRequest(
                document=document,
                config_path=config_path,
                export_format=ExportFormat(export_format),
                output_path=output_path,
            )
        )
    except ExtractionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.text is not None:
        click.echo(outcome.text, nl=False)
    else:
        click.echo(str(outcome.output_path))


@cli.command(name="list-paths")
@click.argument("document")
@_CONFIG_OPTION
def list_paths(document: str, config_path: str | None) -> None:
    """List the endpoint paths declared by DOCUMENT."""
    try:
        loaded = load_configured_document(document, config_path)
    except ExtractionError as exc:
        raise CliError(str(exc)) from exc
    for endpoint in loaded.document.endpoints:
        marker = "" if endpoint.schema is not None else "\t(no response schema)"
        click.echo(f"{endpoint.path}{marker}")


@cli.command(name="list-documents")
@_CONFIG_OPTION
def list_documents(config_path: str | None) -> None:
    """List registered document names and their locations."""
    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    for name, location in configuration.documents.items():
        click.echo(f"{name}\t{location}")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


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
