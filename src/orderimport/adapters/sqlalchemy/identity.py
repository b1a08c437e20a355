"""Dialect-specific switches for writing explicit values into identity columns.

SQL Server refuses explicit values for an IDENTITY column unless
``IDENTITY_INSERT`` is on for that table. PostgreSQL accepts them but leaves
the backing sequence behind, so the sequence is moved past the highest id
when the batch ends. SQLite needs nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import text

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.elements import TextClause


@dataclass(frozen=True, slots=True)
class IdentityInsertToggle:
    """Statements that suspend and restore identity assignment for one table."""

    table: str
    enable_statement: TextClause | None = None
    restore_statement: TextClause | None = None

    def enable(self, connection: Connection) -> None:
        if self.enable_statement is not None:
            connection.execute(self.enable_statement)

    def restore(self, connection: Connection) -> None:
        if self.restore_statement is not None:
            connection.execute(self.restore_statement)

    @property
    def is_noop(self) -> bool:
        return self.enable_statement is None and self.restore_statement is None


def identity_insert_toggle(
    dialect_name: str,
    table: str,
    *,
    column: str = "id",
) -> IdentityInsertToggle:
    """Return the toggle for ``table`` on the given SQLAlchemy dialect."""

    if dialect_name == "mssql":
        return IdentityInsertToggle(
            table=table,
            enable_statement=text(f"SET IDENTITY_INSERT {table} ON"),
            restore_statement=text(f"SET IDENTITY_INSERT {table} OFF"),
        )
    if dialect_name == "postgresql":
        return IdentityInsertToggle(
            table=table,
            restore_statement=text(
                f"SELECT setval(pg_get_serial_sequence('{table}', '{column}'), "  # noqa: S608
                f"COALESCE((SELECT MAX({column}) FROM {table}), 1))"
            ),
        )
    return IdentityInsertToggle(table=table)
