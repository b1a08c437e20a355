"""Reconcile parsed order batches into the order store.

One call handles one batch inside one unit of work. Users and products are
deduplicated by natural key (email, product name) with first-write-wins
semantics; orders keep the identifier given by the source document. The
batch is committed as a whole or rolled back as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from threading import Lock
from typing import TYPE_CHECKING

from orderimport.domain.model import (
    DEFAULT_DESCRIPTION,
    DEFAULT_PASSWORD,
    Order,
    Product,
    User,
)

from .dates import parse_order_date
from .result import ReconcileFailure, ReconcileSuccess

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from orderimport.domain.model import ImportOrder, ImportProduct, ImportUser
    from orderimport.domain.ports import ImportUnitOfWork

    from .result import ReconcileResult

log = getLogger(__name__)

# Batches toggle store-wide identity settings; never run two at once.
_BATCH_LOCK = Lock()


@dataclass(frozen=True, slots=True)
class ImportDefaults:
    """Placeholders for optional fields missing from the source document."""

    password: str = DEFAULT_PASSWORD
    description: str = DEFAULT_DESCRIPTION


@dataclass(slots=True)
class _BatchStats:
    users_created: int = 0
    products_created: int = 0


@dataclass(slots=True)
class OrderReconciler:
    """Persist a batch of import candidates atomically."""

    unit_of_work_factory: Callable[[], ImportUnitOfWork]
    defaults: ImportDefaults = field(default_factory=ImportDefaults)

    def reconcile(self, batch: Iterable[ImportOrder]) -> ReconcileResult:
        """Reconcile ``batch`` and report the committed orders or the failure.

        Reconciliation-level faults (bad dates, constraint violations, store
        errors) never escape; they roll the batch back and come back as a
        ``ReconcileFailure``. Interrupts still propagate after rollback.
        """

        candidates = list(batch)
        if not candidates:
            log.info("Nothing to reconcile: empty batch")
            return ReconcileSuccess(orders=())

        log.info("Reconciling %s orders", len(candidates))
        stats = _BatchStats()
        with _BATCH_LOCK:
            try:
                orders = self._reconcile_batch(candidates, stats)
            except Exception as exc:  # noqa: BLE001
                log.exception("Order batch rolled back, no changes were saved")
                return ReconcileFailure(reason=str(exc) or type(exc).__name__, error=exc)

        log.info(
            "Reconciled orders=%s, new users=%s, new products=%s",
            len(orders),
            stats.users_created,
            stats.products_created,
        )
        return ReconcileSuccess(
            orders=orders,
            users_created=stats.users_created,
            products_created=stats.products_created,
        )

    def _reconcile_batch(
        self,
        candidates: list[ImportOrder],
        stats: _BatchStats,
    ) -> tuple[Order, ...]:
        # Leaving the unit of work with an exception rolls the batch back.
        with self.unit_of_work_factory() as uow:
            with uow.explicit_order_ids():
                orders = tuple(
                    self._reconcile_order(uow, candidate, stats) for candidate in candidates
                )
                uow.flush()
            uow.commit()
        return orders

    def _reconcile_order(
        self,
        uow: ImportUnitOfWork,
        candidate: ImportOrder,
        stats: _BatchStats,
    ) -> Order:
        order_date = parse_order_date(candidate.reg_date, order_number=candidate.number)
        user = self._resolve_user(uow, candidate.user, stats)

        order = Order(id=candidate.number, user_id=_require_id(user.id), date=order_date)
        for line in candidate.lines:
            product = self._resolve_product(uow, line.product, stats)
            order.add_item(product_id=_require_id(product.id), quantity=line.quantity)

        uow.repositories.orders.add(order)
        return order

    def _resolve_user(
        self,
        uow: ImportUnitOfWork,
        candidate: ImportUser,
        stats: _BatchStats,
    ) -> User:
        existing = uow.repositories.users.get_by_email(candidate.email)
        if existing is not None:
            log.debug("Reusing user %s for %s", existing.id, candidate.email)
            return existing

        user = User(
            name=candidate.name,
            email=candidate.email,
            password=candidate.password or self.defaults.password,
        )
        uow.repositories.users.add(user)
        # Later orders in this batch must find the row instead of inserting a twin.
        uow.flush()
        stats.users_created += 1
        log.debug("Created user %s for %s", user.id, candidate.email)
        return user

    def _resolve_product(
        self,
        uow: ImportUnitOfWork,
        candidate: ImportProduct,
        stats: _BatchStats,
    ) -> Product:
        existing = uow.repositories.products.get_by_name(candidate.name)
        if existing is not None:
            log.debug("Reusing product %s for %r", existing.id, candidate.name)
            return existing

        product = Product(
            name=candidate.name,
            price=candidate.price,
            description=candidate.description or self.defaults.description,
        )
        uow.repositories.products.add(product)
        uow.flush()
        stats.products_created += 1
        log.debug("Created product %s for %r", product.id, candidate.name)
        return product


def _require_id(entity_id: int | None) -> int:
    if entity_id is None:
        raise RuntimeError("Store did not assign an id on flush")
    return entity_id
