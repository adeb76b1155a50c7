"""Shared tabular export constants."""

from __future__ import annotations

from enum import Enum

FIELD_COLUMNS: tuple[str, ...] = ("Path", "Title", "Parents", "Type", "Description", "Example")
FIELDS_SHEET_NAME = "Fields"


class ExportFormat(str, Enum):
    """Supported output formats."""

    CSV = "csv"
    TSV = "tsv"
    XLSX = "xlsx"

    @property
    def delimiter(self) -> str:
        if self is ExportFormat.CSV:
            return ","
        if self is ExportFormat.TSV:
            return "\t"
        raise ValueError(f"{self.value} is not a delimited format.")

    @property
    def is_delimited(self) -> bool:
        return self is not ExportFormat.XLSX
