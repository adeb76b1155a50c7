"""Field flattening exports."""

from .field_formatter import PARENT_SEPARATOR, flatten_endpoint, format_capture, render_parents
from .field_models import FieldRecord, LeafCapture, LineageRecord
from .flattener import DEFAULT_MAX_DEPTH, flatten

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "PARENT_SEPARATOR",
    "FieldRecord",
    "LeafCapture",
    "LineageRecord",
    "flatten",
    "flatten_endpoint",
    "format_capture",
    "render_parents",
]
