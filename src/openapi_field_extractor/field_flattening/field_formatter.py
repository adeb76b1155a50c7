"""Leaf capture rendering into flat field records."""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

from openapi_field_extractor.document_loading.document_models import EndpointSchema

from .field_models import FieldRecord, LeafCapture, LineageRecord
from .flattener import DEFAULT_MAX_DEPTH, flatten

PARENT_SEPARATOR = " > "


def render_parents(lineage: LineageRecord | None) -> str:
    """Join ancestor titles root-first, skipping untitled ancestors."""
    if lineage is None:
        return ""
    titles = [record.title for record in lineage.chain() if record.title]
    return PARENT_SEPARATOR.join(reversed(titles))


def format_capture(capture: LeafCapture, endpoint_path: str) -> FieldRecord:
    node = capture.node
    return FieldRecord(
        path=endpoint_path,
        title=node.title or "",
        parents=render_parents(capture.parent_lineage),
        type=node.type or "",
        description=node.description or "",
        example=render_example(node.example),
    )


def render_example(value: Any) -> str:
    """Render an example value as text; structured values become compact JSON."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # YAML loads unquoted ISO dates as date objects.
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return json.dumps(value, ensure_ascii=False, default=str)


def flatten_endpoint(
    endpoint: EndpointSchema, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> list[FieldRecord]:
    """Flatten one endpoint's response schema starting from a fresh lineage root."""
    if endpoint.schema is None:
        return []
    captures = flatten(endpoint.schema, None, max_depth=max_depth)
    return [format_capture(capture, endpoint.path) for capture in captures]
