import sqlite3

import pytest

from blockrows.modules import ModuleRow, insert_enable_modules, new_module_rows

MODULES = ["auth", "bank", "consensus", "distribution", "gov", "mint", "pricefeed", "staking", "supply"]


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE modules (module_name TEXT NOT NULL PRIMARY KEY)")
    yield conn
    conn.close()


def _stored(conn):
    return [ModuleRow(name) for (name,) in conn.execute("SELECT * FROM modules ORDER BY rowid")]


def test_insert_enable_modules(connection):
    insert_enable_modules(connection, MODULES)
    assert _stored(connection) == new_module_rows(MODULES)


def test_insert_replaces_existing(connection):
    insert_enable_modules(connection, ["auth", "bank"])
    insert_enable_modules(connection, ["gov"])
    assert _stored(connection) == [ModuleRow("gov")]


def test_empty_list_keeps_existing(connection):
    insert_enable_modules(connection, ["auth"])
    insert_enable_modules(connection, [])
    assert _stored(connection) == [ModuleRow("auth")]


def test_duplicates_are_ignored(connection):
    insert_enable_modules(connection, ["auth", "auth", "bank"])
    assert _stored(connection) == new_module_rows(["auth", "bank"])


def test_missing_table_raises():
    conn = sqlite3.connect(":memory:")
    with pytest.raises(RuntimeError, match="error while deleting modules"):
        insert_enable_modules(conn, ["auth"])
    conn.close()


def test_new_module_rows_order():
    assert new_module_rows(["b", "a"]) == [ModuleRow("b"), ModuleRow("a")]