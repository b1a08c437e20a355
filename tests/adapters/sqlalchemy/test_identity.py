from __future__ import annotations

import pytest

from orderimport.adapters.sqlalchemy.identity import identity_insert_toggle


def test_mssql_toggle_switches_identity_insert() -> None:
    toggle = identity_insert_toggle("mssql", "orders")

    assert toggle.enable_statement is not None
    assert toggle.restore_statement is not None
    assert toggle.enable_statement.text == "SET IDENTITY_INSERT orders ON"
    assert toggle.restore_statement.text == "SET IDENTITY_INSERT orders OFF"


def test_postgresql_toggle_resyncs_sequence_on_restore() -> None:
    toggle = identity_insert_toggle("postgresql", "orders")

    assert toggle.enable_statement is None
    assert toggle.restore_statement is not None
    assert "pg_get_serial_sequence('orders', 'id')" in toggle.restore_statement.text
    assert "MAX(id) FROM orders" in toggle.restore_statement.text


@pytest.mark.parametrize("dialect_name", ["sqlite", "mysql"])
def test_other_dialects_need_no_toggle(dialect_name: str) -> None:
    toggle = identity_insert_toggle(dialect_name, "orders")

    assert toggle.is_noop


class _RecordingConnection:
    def __init__(self) -> None:
        self.statements: list[str] = []

    def execute(self, statement: object) -> None:
        self.statements.append(str(statement))


def test_toggle_executes_statements_on_connection() -> None:
    toggle = identity_insert_toggle("mssql", "orders")
    connection = _RecordingConnection()

    toggle.enable(connection)  # type: ignore[arg-type]
    toggle.restore(connection)  # type: ignore[arg-type]

    assert connection.statements == [
        "SET IDENTITY_INSERT orders ON",
        "SET IDENTITY_INSERT orders OFF",
    ]


def test_noop_toggle_leaves_connection_alone() -> None:
    toggle = identity_insert_toggle("sqlite", "orders")
    connection = _RecordingConnection()

    toggle.enable(connection)  # type: ignore[arg-type]
    toggle.restore(connection)  # type: ignore[arg-type]

    assert connection.statements == []
