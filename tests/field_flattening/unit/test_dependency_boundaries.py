"""Boundary tests for field_flattening internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_flattening_core_does_not_import_io_or_export_libraries() -> None:
    flattening_dir = _project_root() / "src" / "openapi_field_extractor" / "field_flattening"
    core_modules = (
        flattening_dir / "field_models.py",
        flattening_dir / "flattener.py",
        flattening_dir / "field_formatter.py",
    )
    forbidden_import_fragments = (
        "import httpx",
        "import yaml",
        "openpyxl",
        "import click",
        "openapi_field_extractor.tabular_export",
        "openapi_field_extractor.document_loading.schema_tree_builder",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
