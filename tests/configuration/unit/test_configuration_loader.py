"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from openapi_field_extractor.configuration.loader import (
    ConfigurationError,
    load_configuration,
    resolve_document_location,
)
from openapi_field_extractor.configuration.runtime_settings import BUILTIN_DOCUMENTS


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_without_file_returns_builtin_registry_and_defaults() -> None:
    configuration = load_configuration()

    assert configuration.path is None
    assert dict(configuration.documents) == dict(BUILTIN_DOCUMENTS)
    assert configuration.fetch.timeout_seconds == 30
    assert configuration.traversal.max_depth == 64


def test_loads_yaml_configuration_with_overrides(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "openapi-fields.yaml",
        """
documents:
  api_particulier: "https://staging.example.com/particulier.yml"
  local_copy: "specs/openapi.yaml"
fetch:
  timeout_seconds: 5
traversal:
  max_depth: 12
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.documents["api_particulier"] == "https://staging.example.com/particulier.yml"
    assert configuration.documents["api_entreprise"] == BUILTIN_DOCUMENTS["api_entreprise"]
    assert configuration.documents["local_copy"] == str((tmp_path / "specs" / "openapi.yaml").resolve())
    assert configuration.fetch.timeout_seconds == 5
    assert configuration.traversal.max_depth == 12


def test_loads_json_configuration_and_empty_file(tmp_path: Path) -> None:
    json_path = _write_file(
        tmp_path / "config.json",
        json.dumps({"documents": {"abs": "/srv/specs/openapi.json"}}),
    )
    empty_path = _write_file(tmp_path / "empty.yaml", "")

    assert load_configuration(json_path).documents["abs"] == "/srv/specs/openapi.json"
    assert load_configuration(empty_path).traversal.max_depth == 64


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- a\n- b\n", "root must be a mapping"),
        ("documents: [a, b]\n", "'documents' must be a mapping"),
        ("documents:\n  api: ''\n", "documents.api must not be empty"),
        ("documents:\n  api: 3\n", "documents.api must be a string"),
        ("fetch:\n  timeout_seconds: 0\n", "fetch.timeout_seconds must be greater than zero"),
        ("traversal:\n  max_depth: true\n", "traversal.max_depth must be an integer"),
        ("traversal: {max_depth: [\n", "Failed to parse"),
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_resolve_document_location_accepts_names_urls_and_files(tmp_path: Path) -> None:
    configuration = load_configuration()
    local_file = _write_file(tmp_path / "openapi.yaml", "paths: {}\n")

    assert resolve_document_location(configuration, "api_entreprise") == (
        BUILTIN_DOCUMENTS["api_entreprise"]
    )
    assert resolve_document_location(configuration, "https://x.test/o.yml") == "https://x.test/o.yml"
    assert resolve_document_location(configuration, str(local_file)) == str(local_file)


def test_resolve_document_location_rejects_unknown_names() -> None:
    with pytest.raises(ConfigurationError, match="Unknown document 'nope'.*api_entreprise"):
        resolve_document_location(load_configuration(), "nope")
