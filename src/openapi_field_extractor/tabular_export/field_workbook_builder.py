"""Excel workbook export of field records."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from openapi_field_extractor.field_flattening.field_models import FieldRecord

from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME


def write_field_workbook(records: Sequence[FieldRecord], output_path: Path | str) -> Path:
    """Create a workbook with a header row and one row per field record."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = FIELDS_SHEET_NAME

    for column_index, name in enumerate(FIELD_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name).style = "Headline 3"
    for row_index, record in enumerate(records, start=2):
        for column_index, value in enumerate(record.as_row(), start=1):
            # Control characters are rejected by the xlsx format.
            cleaned = ILLEGAL_CHARACTERS_RE.sub("", value)
            sheet.cell(row=row_index, column=column_index, value=cleaned)

    _size_columns(sheet, records)
    sheet.freeze_panes = "A2"

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path.resolve()


def _size_columns(sheet: Worksheet, records: Sequence[FieldRecord]) -> None:
    for column_index, name in enumerate(FIELD_COLUMNS, start=1):
        longest = max(
            [len(name)] + [len(record.as_row()[column_index - 1]) for record in records]
        )
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(longest + 4, 60)
        )
