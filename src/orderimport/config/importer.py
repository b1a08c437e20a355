"""Import run configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from orderimport.domain.model import DEFAULT_DESCRIPTION, DEFAULT_PASSWORD

from .env import optional_env_var

DEFAULT_SOURCE_FILENAME: Final[str] = "order.xml"


@dataclass(frozen=True, slots=True)
class ImportConfig:
    source_path: Path = Path(DEFAULT_SOURCE_FILENAME)
    default_password: str = DEFAULT_PASSWORD
    default_description: str = DEFAULT_DESCRIPTION


def get_import_config() -> ImportConfig:
    return ImportConfig(
        source_path=Path(optional_env_var("ORDERS_XML_PATH", DEFAULT_SOURCE_FILENAME)),
        default_password=optional_env_var("ORDERIMPORT_DEFAULT_PASSWORD", DEFAULT_PASSWORD),
        default_description=optional_env_var(
            "ORDERIMPORT_DEFAULT_DESCRIPTION",
            DEFAULT_DESCRIPTION,
        ),
    )
