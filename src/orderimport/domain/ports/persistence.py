"""Ports for persisting order aggregates."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from orderimport.domain.model import Order, Product, User


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class UserRepository(Repository[User], Protocol):
    """Persistence contract for users, keyed naturally by email."""

    def get_by_email(self, email: str) -> User | None: ...


@runtime_checkable
class ProductRepository(Repository[Product], Protocol):
    """Persistence contract for products, keyed naturally by name."""

    def get_by_name(self, name: str) -> Product | None: ...


@runtime_checkable
class OrderRepository(Repository[Order], Protocol):
    """Persistence contract for orders with caller-supplied identifiers."""

    def get(self, order_id: int) -> Order | None: ...
