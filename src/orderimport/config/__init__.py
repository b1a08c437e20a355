"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .importer import ImportConfig, get_import_config
from .logging import configure_logging
from .storage import (
    IN_MEMORY_DATABASE_URI,
    DatabaseConfig,
    default_data_dir,
    get_database_config,
)

__all__ = [
    "IN_MEMORY_DATABASE_URI",
    "ConfigurationError",
    "DatabaseConfig",
    "ImportConfig",
    "configure_logging",
    "default_data_dir",
    "get_database_config",
    "get_import_config",
    "optional_env_var",
]
