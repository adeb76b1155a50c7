"""Endpoint response schema extraction and schema graph materialization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote

import httpx

from .document_fetcher import DEFAULT_TIMEOUT_SECONDS, fetch_document_text, parse_document
from .document_models import ApiDocument, EndpointSchema, NodeKind, SchemaNode

_LOGGER = logging.getLogger(__name__)

SUCCESS_STATUS = "200"
JSON_MEDIA_TYPE = "application/json"
COMPOSITE_KEYWORDS: tuple[str, ...] = ("allOf", "oneOf", "anyOf")
REFERENCE_SIBLING_KEYWORDS: tuple[str, ...] = ("title", "description", "example", "examples")


def load_api_document(
    location: str,
    *,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> ApiDocument:
    """Fetch, parse and materialize the API document found at `location`."""
    text = fetch_document_text(location, timeout_seconds=timeout_seconds, client=client)
    return build_api_document(parse_document(text, location), location)


def build_api_document(raw: Mapping[str, Any], location: str) -> ApiDocument:
    """Return one endpoint entry per declared path, in document order.

    Paths without a GET success-response JSON body keep an entry whose schema
    is `None`.
    """
    builder = SchemaGraphBuilder(raw)
    endpoints: list[EndpointSchema] = []
    for path, path_item in raw["paths"].items():
        raw_schema = _success_response_schema(path_item, builder)
        if raw_schema is None:
            _LOGGER.info("No success-response JSON schema declared for %s", path)
            endpoints.append(EndpointSchema(path=str(path), schema=None))
            continue
        endpoints.append(EndpointSchema(path=str(path), schema=builder.build(raw_schema)))

    info = raw.get("info")
    title = info.get("title") if isinstance(info, Mapping) else None
    return ApiDocument(
        location=location,
        spec_version=str(raw.get("openapi") or raw.get("swagger") or ""),
        title=str(title) if title else None,
        endpoints=tuple(endpoints),
    )


def _success_response_schema(path_item: Any, builder: SchemaGraphBuilder) -> Any | None:
    path_item = builder.dereference(path_item)
    if not isinstance(path_item, Mapping):
        return None
    operation = path_item.get("get")
    if not isinstance(operation, Mapping):
        return None
    responses = operation.get("responses")
    if not isinstance(responses, Mapping):
        return None
    # YAML loads an unquoted status code as an integer key.
    raw_response = responses.get(SUCCESS_STATUS, responses.get(int(SUCCESS_STATUS)))
    response = builder.dereference(raw_response)
    if not isinstance(response, Mapping):
        return None

    content = response.get("content")
    if isinstance(content, Mapping):
        media = _json_media(content)
        schema = media.get("schema") if media is not None else None
    else:
        schema = response.get("schema")
    return schema if isinstance(schema, Mapping) else None


def _json_media(content: Mapping[str, Any]) -> Mapping[str, Any] | None:
    exact = content.get(JSON_MEDIA_TYPE)
    if isinstance(exact, Mapping):
        return exact
    for media_type, media in content.items():
        base = str(media_type).split(";", 1)[0].strip().lower()
        if (base == JSON_MEDIA_TYPE or base.endswith("+json")) and isinstance(media, Mapping):
            return media
    return None


class SchemaGraphBuilder:
    """Build classified `SchemaNode` graphs from raw schema mappings.

    Internal `$ref` pointers are resolved against the document root. Every
    distinct reference target yields a single shared node, so recursive
    schemas become cyclic graphs instead of infinite trees.

    A `$ref` carrying sibling `title`, `description` or `example` keywords
    yields its own node: the shared target's shape with those keywords
    applied over it.
    """

    def __init__(self, root: Mapping[str, Any]) -> None:
        self._root = root
        self._nodes_by_ref: dict[str, SchemaNode] = {}
        self._pending_overlays: list[tuple[SchemaNode, SchemaNode, Mapping[str, Any]]] = []
        self._build_depth = 0

    def build(self, raw: Any) -> SchemaNode:
        self._build_depth += 1
        try:
            node = self._build(raw)
        finally:
            self._build_depth -= 1
        if self._build_depth == 0:
            self._apply_overlays()
        return node

    def _build(self, raw: Any) -> SchemaNode:
        if not isinstance(raw, Mapping):
            return SchemaNode()
        ref = raw.get("$ref")
        if isinstance(ref, str):
            target = self._build_reference(ref)
            if not any(keyword in raw for keyword in REFERENCE_SIBLING_KEYWORDS):
                return target
            overlay = SchemaNode()
            # Filled once the outermost build returns; the target may still be populating.
            self._pending_overlays.append((overlay, target, raw))
            return overlay
        node = SchemaNode()
        self._populate(node, raw)
        return node

    def _apply_overlays(self) -> None:
        pending, self._pending_overlays = self._pending_overlays, []
        for overlay, target, raw in pending:
            overlay.type = target.type
            overlay.properties = target.properties
            overlay.items = target.items
            overlay.members = target.members
            overlay.kind = target.kind
            overlay.title = _optional_text(raw["title"]) if "title" in raw else target.title
            overlay.description = (
                _optional_text(raw["description"]) if "description" in raw else target.description
            )
            has_example = "example" in raw or "examples" in raw
            overlay.example = _example(raw) if has_example else target.example

    def dereference(self, value: Any) -> Any:
        """Follow `$ref` chains on non-schema objects such as responses."""
        resolved = self._follow_references(value)
        return resolved[1] if resolved is not None else value

    def _build_reference(self, ref: str) -> SchemaNode:
        resolved = self._follow_references({"$ref": ref})
        if resolved is None:
            _LOGGER.warning("Unresolvable schema reference %s left unexpanded", ref)
            return SchemaNode()
        final_ref, target = resolved
        existing = self._nodes_by_ref.get(final_ref)
        if existing is not None:
            return existing
        node = SchemaNode()
        # Registered before populating so that self-references close on this node.
        self._nodes_by_ref[final_ref] = node
        self._populate(node, target)
        return node

    def _follow_references(self, value: Any) -> tuple[str, Any] | None:
        if not isinstance(value, Mapping) or not isinstance(value.get("$ref"), str):
            return None
        seen: set[str] = set()
        ref = value["$ref"]
        target: Any = value
        while isinstance(target, Mapping) and isinstance(target.get("$ref"), str):
            ref = target["$ref"]
            if ref in seen:
                return None
            seen.add(ref)
            target = self._resolve_pointer(ref)
            if target is None:
                return None
        return ref, target

    def _resolve_pointer(self, ref: str) -> Any | None:
        if not ref.startswith("#"):
            return None
        pointer = ref[1:]
        current: Any = self._root
        if not pointer:
            return current
        if not pointer.startswith("/"):
            return None
        for raw_token in pointer[1:].split("/"):
            token = unquote(raw_token).replace("~1", "/").replace("~0", "~")
            if isinstance(current, Mapping):
                if token in current:
                    current = current[token]
                elif token.isdigit() and int(token) in current:
                    current = current[int(token)]
                else:
                    return None
            elif isinstance(current, list) and token.isdigit() and int(token) < len(current):
                current = current[int(token)]
            else:
                return None
        return current

    def _populate(self, node: SchemaNode, raw: Mapping[str, Any]) -> None:
        node.title = _optional_text(raw.get("title"))
        node.type = _render_type(raw.get("type"))
        node.description = _optional_text(raw.get("description"))
        node.example = _example(raw)

        properties = raw.get("properties")
        if isinstance(properties, Mapping):
            node.properties = {str(name): self.build(child) for name, child in properties.items()}
        items = raw.get("items")
        if isinstance(items, Mapping):
            node.items = self.build(items)
        members: list[SchemaNode] = []
        for keyword in COMPOSITE_KEYWORDS:
            branches = raw.get(keyword)
            if isinstance(branches, list):
                members.extend(self.build(branch) for branch in branches)
        node.members = tuple(members)
        node.kind = classify_node(node)


def classify_node(node: SchemaNode) -> NodeKind:
    """Pick the traversal shape: object, then array, then composite, then scalar."""
    if node.properties:
        return NodeKind.OBJECT
    if node.items is not None:
        return NodeKind.ARRAY
    if node.members:
        return NodeKind.COMPOSITE
    if node.type:
        return NodeKind.LEAF
    return NodeKind.UNKNOWN


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _render_type(value: Any) -> str | None:
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, list):
        names = [item for item in value if isinstance(item, str)]
        non_null = [name for name in names if name != "null"]
        if non_null:
            return " | ".join(non_null)
        return "null" if names else None
    return None


def _example(raw: Mapping[str, Any]) -> Any:
    if "example" in raw:
        return raw["example"]
    examples = raw.get("examples")
    if isinstance(examples, list) and examples:
        return examples[0]
    return None
