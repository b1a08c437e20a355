"""Persisted order entities.

Users and products receive surrogate ids from the store when flushed. Orders
carry the identifier supplied by the source document and keep it verbatim.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003
from dataclasses import dataclass, field
from decimal import Decimal  # noqa: TC003
from typing import Final

DEFAULT_PASSWORD: Final[str] = "default_password"
DEFAULT_DESCRIPTION: Final[str] = "DefaultProductDescription"


@dataclass(eq=False, kw_only=True)
class User:
    """A customer, identified across batches by ``email``."""

    name: str
    email: str
    password: str = DEFAULT_PASSWORD
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class Product:
    """A catalog product, identified across batches by ``name``."""

    name: str
    price: Decimal
    description: str = DEFAULT_DESCRIPTION
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class OrderItem:
    product_id: int
    quantity: int
    order_id: int | None = None
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class Order:
    """An order as written to the store.

    ``id`` is never assigned by the store; it comes from the imported document.
    """

    id: int
    user_id: int
    date: dt.date
    items: list[OrderItem] = field(default_factory=list["OrderItem"])

    def add_item(self, *, product_id: int, quantity: int) -> OrderItem:
        if quantity <= 0:
            raise ValueError("OrderItem quantity must be positive")
        item = OrderItem(product_id=product_id, quantity=quantity)
        self.items.append(item)
        return item
