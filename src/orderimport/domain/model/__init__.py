"""Public domain model surface."""

from __future__ import annotations

from orderimport.domain.model.candidates import ImportLine, ImportOrder, ImportProduct, ImportUser
from orderimport.domain.model.entities import (
    DEFAULT_DESCRIPTION,
    DEFAULT_PASSWORD,
    Order,
    OrderItem,
    Product,
    User,
)

__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_PASSWORD",
    "ImportLine",
    "ImportOrder",
    "ImportProduct",
    "ImportUser",
    "Order",
    "OrderItem",
    "Product",
    "User",
]
