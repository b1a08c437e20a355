from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from orderimport.adapters.sqlalchemy.unit_of_work import startup
from orderimport.app import import_orders_file
from orderimport.config import configure_logging
from orderimport.domain.reconciliation import ReconcileFailure

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import XML order batches into the order store")
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_cmd = subparsers.add_parser("import", help="Import an XML order document")
    import_cmd.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Order document to import (defaults to ORDERS_XML_PATH or order.xml)",
    )
    import_cmd.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URL (defaults to DATABASE_URI or the local data dir)",
    )
    import_cmd.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every user and product resolution and the SQL sent to the store",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        if parsed_args.database_uri:
            startup(database_uri=parsed_args.database_uri, force=True)
        result = import_orders_file(parsed_args.path)
    except Exception:
        log.exception("Fatal error during import")
        sys.exit(1)

    if isinstance(result, ReconcileFailure):
        sys.exit(1)
    log.info("Orders imported: %s", len(result.orders))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(130)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
