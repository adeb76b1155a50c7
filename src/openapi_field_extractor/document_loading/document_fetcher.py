"""API document retrieval and parsing."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
import yaml

_LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30


class DocumentUnavailableError(Exception):
    """Raised when an API document cannot be fetched or parsed."""


def is_remote_location(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch_document_text(
    location: str,
    *,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> str:
    """Return the raw text of an API document from a URL or a local file.

    Args:
      location: `http(s)://` URL, `file://` URL, or filesystem path.
      timeout_seconds: HTTP timeout applied to remote fetches.
      client: Optional preconfigured HTTP client, used instead of a fresh one.

    Raises:
      DocumentUnavailableError: If the document cannot be retrieved.
    """
    if is_remote_location(location):
        return _fetch_remote_text(location, timeout_seconds=timeout_seconds, client=client)

    path = Path(location.removeprefix("file://"))
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentUnavailableError(f"Cannot read API document {path}: {exc}") from exc


def _fetch_remote_text(
    location: str, *, timeout_seconds: int, client: httpx.Client | None
) -> str:
    _LOGGER.info("Fetching API document from %s", location)
    try:
        if client is not None:
            response = client.get(location, follow_redirects=True, timeout=timeout_seconds)
        else:
            response = httpx.get(location, follow_redirects=True, timeout=timeout_seconds)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise DocumentUnavailableError(f"Cannot fetch API document {location}: {exc}") from exc
    return response.text


def parse_document(text: str, location: str) -> Mapping[str, Any]:
    """Parse JSON or YAML document text into a mapping with a `paths` section."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentUnavailableError(f"Invalid API document {location}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise DocumentUnavailableError(f"API document root must be a mapping: {location}")
    if not isinstance(parsed.get("paths"), Mapping):
        raise DocumentUnavailableError(f"API document declares no paths: {location}")
    return parsed
