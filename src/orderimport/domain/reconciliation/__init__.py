"""Reconciliation of parsed order batches into the relational store.

Flow for one batch:
1) suspend identity assignment for orders
2) per order: parse the date, find-or-create the user by email, find-or-create
   each product by name, stage the order with its items
3) flush, restore identity assignment, commit
4) on any failure roll everything back and return a failure result
"""

from __future__ import annotations

from .dates import parse_order_date
from .engine import ImportDefaults, OrderReconciler
from .errors import InvalidOrderDateError, NaturalKeyConflictError, ReconciliationError
from .result import ReconcileFailure, ReconcileResult, ReconcileSuccess

__all__ = [
    "ImportDefaults",
    "InvalidOrderDateError",
    "NaturalKeyConflictError",
    "OrderReconciler",
    "ReconcileFailure",
    "ReconcileResult",
    "ReconcileSuccess",
    "ReconciliationError",
    "parse_order_date",
]
