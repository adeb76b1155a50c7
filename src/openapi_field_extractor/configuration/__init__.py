"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, resolve_document_location
from .runtime_settings import (
    BUILTIN_DOCUMENTS,
    Configuration,
    FetchSettings,
    TraversalSettings,
    default_configuration,
)

__all__ = [
    "BUILTIN_DOCUMENTS",
    "Configuration",
    "FetchSettings",
    "TraversalSettings",
    "default_configuration",
    "ConfigurationError",
    "load_configuration",
    "resolve_document_location",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
