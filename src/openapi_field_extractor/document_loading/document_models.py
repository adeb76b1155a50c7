"""API document entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Traversal shape assigned to a schema node."""

    OBJECT = "object"
    ARRAY = "array"
    COMPOSITE = "composite"
    LEAF = "leaf"
    UNKNOWN = "unknown"


@dataclass(eq=False)
class SchemaNode:  # pylint: disable=too-many-instance-attributes
    """One node of a materialized response schema graph.

    Nodes are compared by identity. Children are attached after creation so
    that self-referential schemas can be represented as cycles of shared nodes.
    """

    kind: NodeKind = NodeKind.UNKNOWN
    title: str | None = None
    type: str | None = None
    description: str | None = None
    example: Any = None
    properties: dict[str, SchemaNode] = field(default_factory=dict)
    items: SchemaNode | None = None
    members: tuple[SchemaNode, ...] = ()

    @property
    def is_leaf_eligible(self) -> bool:
        return bool(self.title) and bool(self.type)

    @property
    def is_container(self) -> bool:
        return bool(self.properties)

    @property
    def is_leaf_field(self) -> bool:
        """Return whether this node is rendered as one flat field record."""
        return self.is_leaf_eligible and not self.is_container


@dataclass(frozen=True)
class EndpointSchema:
    """Success-response body schema declared for one endpoint path."""

    path: str
    schema: SchemaNode | None


@dataclass(frozen=True)
class ApiDocument:
    """Parsed API description reduced to its endpoint response schemas."""

    location: str
    spec_version: str
    title: str | None
    endpoints: tuple[EndpointSchema, ...]

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(endpoint.path for endpoint in self.endpoints)
