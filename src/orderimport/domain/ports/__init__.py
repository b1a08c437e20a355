"""Domain port definitions for adapters."""

from __future__ import annotations

from .parsing import OrderDocumentParser
from .persistence import OrderRepository, ProductRepository, Repository, UserRepository
from .unit_of_work import ImportRepositories, ImportUnitOfWork, RepositoryCollection, UnitOfWork

__all__ = [
    "ImportRepositories",
    "ImportUnitOfWork",
    "OrderDocumentParser",
    "OrderRepository",
    "ProductRepository",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
    "UserRepository",
]
