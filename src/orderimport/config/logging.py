"""Logging setup for import runs."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
SQL_LOGGER_NAME: Final[str] = "sqlalchemy.engine"


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Configure the root logger for an import run.

    Normal runs report batch progress, skipped orders and failures. ``verbose``
    adds every user and product resolution and echoes the SQL sent to the store.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    # sqlalchemy.engine logs statements at INFO and result rows at DEBUG.
    logging.getLogger(SQL_LOGGER_NAME).setLevel(logging.INFO if verbose else logging.WARNING)
