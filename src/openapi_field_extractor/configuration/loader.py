"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    BUILTIN_DOCUMENTS,
    Configuration,
    FetchSettings,
    TraversalSettings,
    default_configuration,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> Configuration:
    """Load and validate the configuration file, or return built-in defaults."""
    if config_path is None:
        return default_configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    documents = _parse_documents_section(parsed.get("documents"), path.parent)
    fetch = _parse_fetch_section(parsed.get("fetch"))
    traversal = _parse_traversal_section(parsed.get("traversal"))

    return Configuration(path=path, documents=documents, fetch=fetch, traversal=traversal)


def resolve_document_location(configuration: Configuration, document: str) -> str:
    """Map a registered document name to its location.

    Arguments that are not registered names are accepted as locations when
    they are URLs or existing files.

    Raises:
      ConfigurationError: If the argument is neither a known name nor a location.
    """
    candidate = document.strip()
    if not candidate:
        raise ConfigurationError("Document name must not be empty.")
    registered = configuration.documents.get(candidate)
    if registered is not None:
        return registered
    if "://" in candidate or Path(candidate).is_file():
        return candidate
    known = ", ".join(sorted(configuration.documents)) or "none"
    raise ConfigurationError(f"Unknown document '{candidate}'. Known documents: {known}.")


def _parse_documents_section(value: Any, base_path: Path) -> dict[str, str]:
    documents = dict(BUILTIN_DOCUMENTS)
    if value is None:
        return documents
    section = _require_mapping(value, "documents")
    for name, location in section.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("documents keys must be non-empty strings.")
        location_text = _require_non_empty_string(location, f"documents.{name}")
        documents[name.strip()] = _resolve_location(base_path, location_text)
    return documents


def _parse_fetch_section(value: Any) -> FetchSettings:
    if value is None:
        return FetchSettings()
    section = _require_mapping(value, "fetch")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", FetchSettings.timeout_seconds), "fetch.timeout_seconds"
    )
    return FetchSettings(timeout_seconds=timeout_seconds)


def _parse_traversal_section(value: Any) -> TraversalSettings:
    if value is None:
        return TraversalSettings()
    section = _require_mapping(value, "traversal")
    max_depth = _require_positive_int(
        section.get("max_depth", TraversalSettings.max_depth), "traversal.max_depth"
    )
    return TraversalSettings(max_depth=max_depth)


def _resolve_location(base_path: Path, raw_location: str) -> str:
    if "://" in raw_location:
        return raw_location
    candidate = Path(raw_location)
    if not candidate.is_absolute():
        return str((base_path / candidate).resolve())
    return str(candidate)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
