"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from orderimport.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyImportUnitOfWork,
    is_started,
    startup,
)
from orderimport.adapters.xml import XmlOrderParser
from orderimport.config import ImportConfig, get_import_config
from orderimport.domain.ports.unit_of_work import ImportUnitOfWork
from orderimport.domain.reconciliation import ImportDefaults, OrderReconciler, ReconcileSuccess

if TYPE_CHECKING:
    from pathlib import Path

    from orderimport.domain.ports.parsing import OrderDocumentParser
    from orderimport.domain.reconciliation import ReconcileResult

UnitOfWorkFactory = Callable[[], ImportUnitOfWork]


log = getLogger(__name__)


def import_orders_file(
    source: Path | str | None = None,
    *,
    parser: OrderDocumentParser | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: ImportConfig | None = None,
) -> ReconcileResult:
    """Parse an order document and reconcile it into the configured store."""

    effective_config = config or get_import_config()
    effective_source = source or effective_config.source_path
    effective_parser = parser or XmlOrderParser()
    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyImportUnitOfWork

    log.info("Starting order import from %s", effective_source)
    batch = effective_parser.parse(effective_source)
    if not batch:
        log.info("No orders to import from %s", effective_source)
        return ReconcileSuccess(orders=())

    reconciler = OrderReconciler(
        unit_of_work_factory=unit_of_work_factory,
        defaults=ImportDefaults(
            password=effective_config.default_password,
            description=effective_config.default_description,
        ),
    )
    result = reconciler.reconcile(batch)

    # A failed batch has already been reported by the reconciler.
    if isinstance(result, ReconcileSuccess):
        log.info(
            "Finished order import: orders=%s, new users=%s, new products=%s",
            len(result.orders),
            result.users_created,
            result.products_created,
        )
    return result
