"""Transient, not-yet-reconciled shapes produced by document parsers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal  # noqa: TC003


@dataclass(frozen=True, slots=True)
class ImportUser:
    name: str
    email: str
    password: str | None = None


@dataclass(frozen=True, slots=True)
class ImportProduct:
    name: str
    price: Decimal
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ImportLine:
    product: ImportProduct
    quantity: int


@dataclass(frozen=True, slots=True)
class ImportOrder:
    """One parsed order: a candidate order, its user and its product lines.

    ``reg_date`` is kept as the raw document text; turning it into a date is
    part of reconciliation so a bad value fails the batch it belongs to.
    """

    number: int
    reg_date: str
    user: ImportUser
    lines: tuple[ImportLine, ...]
