"""Reusable builders and fakes for order import tests."""

from __future__ import annotations

from contextlib import contextmanager, suppress
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Literal

from orderimport.domain.model import (
    ImportLine,
    ImportOrder,
    ImportProduct,
    ImportUser,
    Order,
    Product,
    User,
)
from orderimport.domain.ports.unit_of_work import ImportRepositories

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from types import TracebackType


def make_import_order(
    number: int = 1,
    *,
    reg_date: str = "2024-08-22",
    user_name: str = "John Doe",
    email: str = "john@x.com",
    password: str | None = None,
    products: Sequence[tuple[str, str, int]] = (("P1", "10.00", 2),),
    description: str | None = None,
) -> ImportOrder:
    """Create an import candidate; ``products`` holds (name, price, quantity) triples."""

    return ImportOrder(
        number=number,
        reg_date=reg_date,
        user=ImportUser(name=user_name, email=email, password=password),
        lines=tuple(
            ImportLine(
                product=ImportProduct(
                    name=name,
                    price=Decimal(price),
                    description=description,
                ),
                quantity=quantity,
            )
            for name, price, quantity in products
        ),
    )


@dataclass
class _Table[TEntity]:
    committed: list[TEntity] = field(default_factory=list["TEntity"])
    staged: list[TEntity] = field(default_factory=list["TEntity"])

    @property
    def rows(self) -> list[TEntity]:
        return [*self.committed, *self.staged]


class FakeUserRepository:
    def __init__(self, table: _Table[User]) -> None:
        self.table = table

    def add(self, entity: User) -> None:
        self.table.staged.append(entity)

    def get_by_email(self, email: str) -> User | None:
        return next((user for user in self.table.rows if user.email == email), None)


class FakeProductRepository:
    def __init__(self, table: _Table[Product]) -> None:
        self.table = table

    def add(self, entity: Product) -> None:
        self.table.staged.append(entity)

    def get_by_name(self, name: str) -> Product | None:
        return next((product for product in self.table.rows if product.name == name), None)


class FakeOrderRepository:
    def __init__(self, table: _Table[Order]) -> None:
        self.table = table

    def add(self, entity: Order) -> None:
        self.table.staged.append(entity)

    def get(self, order_id: int) -> Order | None:
        return next((order for order in self.table.rows if order.id == order_id), None)


class FakeStore:
    """Committed and staged rows shared by fake units of work."""

    def __init__(self) -> None:
        self.users: _Table[User] = _Table()
        self.products: _Table[Product] = _Table()
        self.orders: _Table[Order] = _Table()
        self.events: list[str] = []
        self._next_id = 1

    def assign_ids(self) -> None:
        for entity in (*self.users.staged, *self.products.staged):
            if entity.id is None:
                entity.id = self._next_id
                self._next_id += 1


class FakeImportUnitOfWork:
    """In-memory unit of work recording toggle, flush, commit and rollback calls."""

    def __init__(
        self,
        store: FakeStore,
        *,
        fail_on_restore: bool = False,
        fail_on_commit: bool = False,
    ) -> None:
        self.store = store
        self.fail_on_restore = fail_on_restore
        self.fail_on_commit = fail_on_commit
        self.repositories = ImportRepositories(
            users=FakeUserRepository(store.users),
            products=FakeProductRepository(store.products),
            orders=FakeOrderRepository(store.orders),
        )

    def __enter__(self) -> FakeImportUnitOfWork:
        self.store.events.append("enter")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.store.events.append("exit")
        return False

    def flush(self) -> None:
        self.store.assign_ids()
        self.store.events.append("flush")

    def commit(self) -> None:
        if self.fail_on_commit:
            raise RuntimeError("commit failed")
        for table in (self.store.users, self.store.products, self.store.orders):
            table.committed.extend(table.staged)
            table.staged.clear()
        self.store.events.append("commit")

    def rollback(self) -> None:
        for table in (self.store.users, self.store.products, self.store.orders):
            table.staged.clear()
        self.store.events.append("rollback")

    @contextmanager
    def explicit_order_ids(self) -> Iterator[None]:
        self.store.events.append("identity_on")
        try:
            yield
        except BaseException:
            with suppress(RuntimeError):
                self._restore()
            raise
        self._restore()

    def _restore(self) -> None:
        self.store.events.append("identity_off")
        if self.fail_on_restore:
            raise RuntimeError("restore failed")
