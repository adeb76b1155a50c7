"""Delimited text export of field records."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from openapi_field_extractor.field_flattening.field_models import FieldRecord

from .constants import FIELD_COLUMNS


def write_delimited(records: Sequence[FieldRecord], output: TextIO, delimiter: str = ",") -> None:
    """Write the header row and one row per record to an open text stream."""
    writer = csv.writer(output, delimiter=delimiter, lineterminator="\n")
    writer.writerow(FIELD_COLUMNS)
    writer.writerows(record.as_row() for record in records)


def render_delimited(records: Sequence[FieldRecord], delimiter: str = ",") -> str:
    buffer = io.StringIO()
    write_delimited(records, buffer, delimiter)
    return buffer.getvalue()


def write_delimited_file(
    records: Sequence[FieldRecord], output_path: Path | str, delimiter: str = ","
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        write_delimited(records, handle, delimiter)
    return output_path.resolve()
