"""Field workbook export tests."""

from __future__ import annotations

from pathlib import Path

from openapi_field_extractor.field_flattening.field_models import FieldRecord
from openapi_field_extractor.tabular_export import (
    FIELD_COLUMNS,
    FIELDS_SHEET_NAME,
    write_field_workbook,
)
from openpyxl import load_workbook


def test_workbook_holds_header_and_one_row_per_record(tmp_path: Path) -> None:
    records = [
        FieldRecord("/a", "Name", "Company", "string", "Legal name, long form", "OCTO"),
        FieldRecord("/b", "Id", "", "integer", "", "42"),
    ]

    output = write_field_workbook(records, tmp_path / "out" / "fields.xlsx")

    workbook = load_workbook(output)
    assert workbook.sheetnames == [FIELDS_SHEET_NAME]
    sheet = workbook[FIELDS_SHEET_NAME]
    rows = [tuple(cell.value for cell in row) for row in sheet.iter_rows()]
    assert rows[0] == FIELD_COLUMNS
    assert rows[1] == ("/a", "Name", "Company", "string", "Legal name, long form", "OCTO")
    assert rows[2][0:2] == ("/b", "Id")
    assert sheet.freeze_panes == "A2"


def test_empty_workbook_still_has_header(tmp_path: Path) -> None:
    output = write_field_workbook([], tmp_path / "fields.xlsx")

    sheet = load_workbook(output)[FIELDS_SHEET_NAME]
    assert sheet.max_row == 1
    assert sheet.cell(row=1, column=6).value == "Example"
