"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "openapi-fields.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for openapi-field-extractor.
# Every section is optional; omitted values fall back to the defaults shown.

documents:
  # Symbolic document names mapped to URLs or local paths.
  # Relative paths are resolved against this file's directory.
  # Built-in names (api_particulier, api_entreprise) can be overridden here.
  # my_api: "https://example.com/openapi.yaml"
  # local_copy: "specs/openapi.yaml"

fetch:
  # HTTP timeout for remote documents.
  timeout_seconds: 30

traversal:
  # Deepest schema nesting followed before a branch is cut.
  max_depth: 64
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
