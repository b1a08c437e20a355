"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contextlib import AbstractContextManager
    from types import TracebackType

    from orderimport.domain.ports.persistence import (
        OrderRepository,
        ProductRepository,
        UserRepository,
    )


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](Protocol):
    """Generic unit-of-work boundary around a repository collection."""

    @property
    def repositories(self) -> TRepositories: ...  # the repo list itself should be immutable

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def flush(self) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class ImportRepositories(RepositoryCollection):
    """Repositories required to reconcile an order batch."""

    users: UserRepository
    products: ProductRepository
    orders: OrderRepository


@runtime_checkable
class ImportUnitOfWork(UnitOfWork[ImportRepositories], Protocol):
    """Unit of work able to write caller-supplied order identifiers."""

    def explicit_order_ids(self) -> AbstractContextManager[None]:
        """Suspend identity assignment for orders while the context is open.

        Identity assignment must be restored on every exit path. A failure to
        restore after the body raised must not replace the body's exception.
        """
        ...
