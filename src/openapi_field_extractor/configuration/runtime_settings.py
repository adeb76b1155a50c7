"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

BUILTIN_DOCUMENTS: Mapping[str, str] = {
    "api_particulier": "https://particulier.api.gouv.fr/open-api-without-deprecated-paths.yml",
    "api_entreprise": "https://entreprise.api.gouv.fr/open-api-without-deprecated-paths.yml",
}


@dataclass(frozen=True)
class FetchSettings:
    """Document retrieval settings."""

    timeout_seconds: int = 30


@dataclass(frozen=True)
class TraversalSettings:
    """Schema traversal limits."""

    max_depth: int = 64


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    documents: Mapping[str, str]
    fetch: FetchSettings
    traversal: TraversalSettings


def default_configuration() -> Configuration:
    return Configuration(
        path=None,
        documents=dict(BUILTIN_DOCUMENTS),
        fetch=FetchSettings(),
        traversal=TraversalSettings(),
    )
