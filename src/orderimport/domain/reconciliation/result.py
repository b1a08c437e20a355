"""Outcome types returned by the reconciliation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal

if TYPE_CHECKING:
    from orderimport.domain.model import Order


@dataclass(frozen=True, slots=True)
class ReconcileSuccess:
    """The batch was committed."""

    ok: ClassVar[Literal[True]] = True

    orders: tuple[Order, ...]
    users_created: int = 0
    products_created: int = 0


@dataclass(frozen=True, slots=True)
class ReconcileFailure:
    """The batch was rolled back; nothing from it is visible in the store."""

    ok: ClassVar[Literal[False]] = False

    reason: str
    error: Exception

    @property
    def orders(self) -> tuple[Order, ...]:
        return ()


type ReconcileResult = ReconcileSuccess | ReconcileFailure
