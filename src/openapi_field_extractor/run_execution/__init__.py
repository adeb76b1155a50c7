"""Run execution domain exports."""

from .extraction_use_case import (
    ExtractionError,
    collect_field_records,
    execute_field_extraction,
    load_configured_document,
)
from .run_contracts import ExtractionOutcome, ExtractionRequest, LoadedDocument

__all__ = [
    "ExtractionRequest",
    "ExtractionOutcome",
    "LoadedDocument",
    "ExtractionError",
    "collect_field_records",
    "execute_field_extraction",
    "load_configured_document",
]
