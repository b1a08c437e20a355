"""Location of the order store."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

APP_DIR_NAME: Final[str] = "orderimport"
DATABASE_FILENAME: Final[str] = "orderimport.db"
IN_MEMORY_DATABASE_URI: Final[str] = "sqlite+pysqlite:///:memory:"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """SQLAlchemy URL of the order store; in-memory or durable is fixed here."""

    uri: str

    @classmethod
    def in_data_dir(cls, data_dir: Path) -> DatabaseConfig:
        """Point at a SQLite file inside ``data_dir``, creating the directory if needed."""

        directory = data_dir.expanduser().resolve()
        if directory.exists() and not directory.is_dir():
            raise ConfigurationError(f"Data directory is not a directory: {directory}")
        directory.mkdir(parents=True, exist_ok=True)
        return cls(uri=f"sqlite+pysqlite:///{directory / DATABASE_FILENAME}")

    @property
    def is_in_memory(self) -> bool:
        return self.uri.endswith(":memory:")


def default_data_dir() -> Path:
    if os.name == "nt":
        base = optional_env_var("LOCALAPPDATA", str(Path.home() / "AppData" / "Local"))
    else:
        base = optional_env_var("XDG_DATA_HOME", str(Path.home() / ".local" / "share"))
    return Path(base) / APP_DIR_NAME


def get_database_config() -> DatabaseConfig:
    """Use ``DATABASE_URI`` when set, else a SQLite file under ``ORDERIMPORT_DATA_DIR``."""

    uri = optional_env_var("DATABASE_URI", "")
    if uri:
        return DatabaseConfig(uri=uri)
    data_dir = optional_env_var("ORDERIMPORT_DATA_DIR", "")
    return DatabaseConfig.in_data_dir(Path(data_dir) if data_dir else default_data_dir())
