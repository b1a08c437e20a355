"""SQLAlchemy adapter package for orderimport."""

from __future__ import annotations

from .identity import IdentityInsertToggle, identity_insert_toggle
from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyUserRepository,
)
from .unit_of_work import (
    SqlAlchemyImportUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "IdentityInsertToggle",
    "SqlAlchemyImportUnitOfWork",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyUserRepository",
    "StartupError",
    "create_all_tables",
    "identity_insert_toggle",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
