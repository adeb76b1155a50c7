"""Field flattening entities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from openapi_field_extractor.document_loading.document_models import SchemaNode


@dataclass(frozen=True)
class LineageRecord:
    """Immutable snapshot of one ancestor node, linked to its own parent."""

    title: str | None
    type: str | None
    description: str | None
    example: Any
    parent: LineageRecord | None = None

    @classmethod
    def of(cls, node: SchemaNode, parent: LineageRecord | None) -> LineageRecord:
        return cls(
            title=node.title,
            type=node.type,
            description=node.description,
            example=node.example,
            parent=parent,
        )

    def chain(self) -> Iterator[LineageRecord]:
        """Yield this record and its ancestors, nearest first."""
        record: LineageRecord | None = self
        while record is not None:
            yield record
            record = record.parent


@dataclass(frozen=True)
class LeafCapture:
    """Leaf field node paired with the lineage of its immediate parent."""

    node: SchemaNode
    parent_lineage: LineageRecord | None


@dataclass(frozen=True)
class FieldRecord:
    """Flat, rendered field row."""

    path: str
    title: str
    parents: str
    type: str
    description: str
    example: str

    def as_row(self) -> tuple[str, ...]:
        return (self.path, self.title, self.parents, self.type, self.description, self.example)
