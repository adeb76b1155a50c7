"""Field extraction use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable

from openapi_field_extractor.configuration import (
    ConfigurationError,
    load_configuration,
    resolve_document_location,
)
from openapi_field_extractor.document_loading import (
    ApiDocument,
    DocumentUnavailableError,
    load_api_document,
)
from openapi_field_extractor.field_flattening import (
    DEFAULT_MAX_DEPTH,
    FieldRecord,
    flatten_endpoint,
)
from openapi_field_extractor.tabular_export import (
    render_delimited,
    write_delimited_file,
    write_field_workbook,
)

from .run_contracts import ExtractionOutcome, ExtractionRequest, LoadedDocument

_LOGGER = logging.getLogger(__name__)

DocumentLoader = Callable[..., ApiDocument]


class ExtractionError(Exception):
    """Raised when an extraction run cannot be completed."""


def execute_field_extraction(
    request: ExtractionRequest, *, document_loader: DocumentLoader | None = None
) -> ExtractionOutcome:
    """Load one API document, flatten every endpoint, and export the field records."""
    if not request.export_format.is_delimited and not request.output_path:
        raise ExtractionError("xlsx export requires an output path.")

    loaded = load_configured_document(
        request.document, request.config_path, document_loader=document_loader
    )
    records, skipped_paths = collect_field_records(
        loaded.document, max_depth=loaded.configuration.traversal.max_depth
    )
    _LOGGER.info(
        "Extracted %d fields from %d paths (%d without response schema)",
        len(records),
        len(loaded.document.endpoints),
        len(skipped_paths),
    )

    output_path = None
    text = None
    try:
        if not request.export_format.is_delimited:
            output_path = write_field_workbook(records, request.output_path or "")
        elif request.output_path:
            output_path = write_delimited_file(
                records, request.output_path, request.export_format.delimiter
            )
        else:
            text = render_delimited(records, request.export_format.delimiter)
    except OSError as exc:
        raise ExtractionError(f"Cannot write output: {exc}") from exc

    return ExtractionOutcome(
        document=loaded.document,
        records=tuple(records),
        skipped_paths=tuple(skipped_paths),
        output_path=output_path,
        text=text,
    )


def load_configured_document(
    document: str,
    config_path: str | None = None,
    *,
    document_loader: DocumentLoader | None = None,
) -> LoadedDocument:
    """Resolve `document` through the configuration and load the API document."""
    resolved_document_loader = document_loader or load_api_document
    try:
        configuration = load_configuration(config_path)
        location = resolve_document_location(configuration, document)
        api_document = resolved_document_loader(
            location, timeout_seconds=configuration.fetch.timeout_seconds
        )
    except (ConfigurationError, DocumentUnavailableError) as exc:
        raise ExtractionError(str(exc)) from exc
    return LoadedDocument(configuration=configuration, document=api_document)


def collect_field_records(
    document: ApiDocument, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> tuple[list[FieldRecord], list[str]]:
    """Flatten endpoints one after another, in document order.

    Returns the field records and the paths that declare no response schema.
    """
    records: list[FieldRecord] = []
    skipped_paths: list[str] = []
    for endpoint in document.endpoints:
        if endpoint.schema is None:
            _LOGGER.info("Skipping %s: no success-response JSON schema", endpoint.path)
            skipped_paths.append(endpoint.path)
            continue
        endpoint_records = flatten_endpoint(endpoint, max_depth=max_depth)
        _LOGGER.debug("%s: %d fields", endpoint.path, len(endpoint_records))
        records.extend(endpoint_records)
    return records, skipped_paths
