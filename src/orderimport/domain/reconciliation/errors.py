"""Errors that abort a reconciliation batch."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for domain faults that fail the whole batch."""


class InvalidOrderDateError(ReconciliationError):
    """Raised when an order's registration date cannot be parsed."""

    def __init__(self, order_number: int, value: str) -> None:
        super().__init__(f"Order {order_number} has an invalid date: {value!r}")
        self.order_number = order_number
        self.value = value


class NaturalKeyConflictError(ReconciliationError):
    """Raised when a natural key matches more than one stored row."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"Multiple {entity} rows share the natural key {key!r}")
        self.entity = entity
        self.key = key
