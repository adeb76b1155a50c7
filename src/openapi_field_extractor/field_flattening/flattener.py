"""Recursive response schema flattening."""

from __future__ import annotations

import logging

from openapi_field_extractor.document_loading.document_models import NodeKind, SchemaNode

from .field_models import LeafCapture, LineageRecord

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


def flatten(
    node: SchemaNode | None,
    parent_lineage: LineageRecord | None = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[LeafCapture]:
    """Return leaf captures for every leaf field reachable from `node`.

    Properties, array items and allOf/oneOf/anyOf members are all followed.
    Array nodes pass their parent lineage through unchanged; every other node
    adds its own snapshot for its descendants. A branch stops when it meets a
    node already on the current descent path or exceeds `max_depth`.
    """
    captures: list[LeafCapture] = []
    _flatten_node(
        node,
        parent_lineage=parent_lineage,
        captures=captures,
        descent=frozenset(),
        remaining_depth=max_depth,
    )
    return captures


def _flatten_node(
    node: SchemaNode | None,
    *,
    parent_lineage: LineageRecord | None,
    captures: list[LeafCapture],
    descent: frozenset[int],
    remaining_depth: int,
) -> None:
    if node is None:
        return
    if remaining_depth <= 0:
        _LOGGER.warning(
            "Maximum schema depth reached at %r, branch not expanded",
            node.title or node.kind.value,
        )
        return

    if node.kind is NodeKind.ARRAY:
        lineage = parent_lineage
    else:
        lineage = LineageRecord.of(node, parent_lineage)

    if node.kind is NodeKind.OBJECT:
        children: tuple[SchemaNode, ...] = tuple(node.properties.values())
    elif node.kind is NodeKind.ARRAY:
        children = (node.items,) if node.items is not None else ()
    elif node.kind is NodeKind.COMPOSITE:
        children = node.members
    else:
        return

    child_descent = descent | {id(node)}
    for child in children:
        if id(child) in child_descent:
            _LOGGER.debug(
                "Cycle detected at %r, branch not expanded", child.title or child.kind.value
            )
            continue
        if child.is_leaf_field:
            captures.append(LeafCapture(node=child, parent_lineage=lineage))
        _flatten_node(
            child,
            parent_lineage=lineage,
            captures=captures,
            descent=child_descent,
            remaining_depth=remaining_depth - 1,
        )
