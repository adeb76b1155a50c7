"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from openapi_field_extractor.configuration.runtime_settings import Configuration
from openapi_field_extractor.document_loading.document_models import ApiDocument
from openapi_field_extractor.field_flattening.field_models import FieldRecord
from openapi_field_extractor.tabular_export.constants import ExportFormat


@dataclass(frozen=True)
class ExtractionRequest:
    """Input contract for one extraction run."""

    document: str
    config_path: str | None = None
    export_format: ExportFormat = ExportFormat.CSV
    output_path: str | None = None


@dataclass(frozen=True)
class ExtractionOutcome:
    """Output contract for one completed extraction run.

    `text` holds the rendered delimited output when no output path was given.
    """

    document: ApiDocument
    records: tuple[FieldRecord, ...]
    skipped_paths: tuple[str, ...]
    output_path: Path | None
    text: str | None


@dataclass(frozen=True)
class LoadedDocument:
    """Configuration and API document resolved for one run."""

    configuration: Configuration
    document: ApiDocument
