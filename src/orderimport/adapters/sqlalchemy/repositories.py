"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import MultipleResultsFound

from orderimport.adapters.sqlalchemy.mappings import product_table, user_table
from orderimport.domain.model import Order, Product, User
from orderimport.domain.reconciliation.errors import NaturalKeyConflictError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyUserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: User) -> None:
        self.session.add(entity)

    def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(user_table.c.email == email)
        try:
            return self.session.execute(stmt).scalar_one_or_none()
        except MultipleResultsFound as exc:
            raise NaturalKeyConflictError("user", email) from exc


class SqlAlchemyProductRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Product) -> None:
        self.session.add(entity)

    def get_by_name(self, name: str) -> Product | None:
        stmt = select(Product).where(product_table.c.name == name)
        try:
            return self.session.execute(stmt).scalar_one_or_none()
        except MultipleResultsFound as exc:
            raise NaturalKeyConflictError("product", name) from exc


class SqlAlchemyOrderRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Order) -> None:
        self.session.add(entity)

    def get(self, order_id: int) -> Order | None:
        return self.session.get(Order, order_id)
