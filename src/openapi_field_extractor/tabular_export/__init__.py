"""Tabular export exports."""

from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME, ExportFormat
from .delimited_writer import render_delimited, write_delimited, write_delimited_file
from .field_workbook_builder import write_field_workbook

__all__ = [
    "FIELD_COLUMNS",
    "FIELDS_SHEET_NAME",
    "ExportFormat",
    "render_delimited",
    "write_delimited",
    "write_delimited_file",
    "write_field_workbook",
]
