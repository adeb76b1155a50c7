"""API document loading exports."""

from .document_fetcher import DocumentUnavailableError, fetch_document_text, parse_document
from .document_models import ApiDocument, EndpointSchema, NodeKind, SchemaNode
from .schema_tree_builder import build_api_document, load_api_document

__all__ = [
    "ApiDocument",
    "EndpointSchema",
    "NodeKind",
    "SchemaNode",
    "DocumentUnavailableError",
    "build_api_document",
    "fetch_document_text",
    "load_api_document",
    "parse_document",
]
