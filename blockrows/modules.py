"""The modules table: rows and storage of the enabled modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class ModuleRow:
    """A single row of the modules table."""

    module: str


def new_module_rows(names: Sequence[str]) -> list[ModuleRow]:
    """Build one row for each module name, in order."""
    return [ModuleRow(name) for name in names]


def insert_enable_modules(connection: Any, modules: Sequence[str]) -> None:
    """Replace the stored modules with the given ones.

    The connection is a DB-API connection using qmark parameters. Nothing is
    done when no modules are given.
    """
    if not modules:
        return

    cursor = connection.cursor()
    try:
        cursor.execute("DELETE FROM modules WHERE TRUE")
    except Exception as exc:
        raise RuntimeError(f"error while deleting modules: {exc}") from exc

    placeholders = ",".join("(?)" for _ in modules)
    stmt = f"INSERT INTO modules (module_name) VALUES {placeholders} ON CONFLICT DO NOTHING"
    try:
        cursor.execute(stmt, list(modules))
    except Exception as exc:
        raise RuntimeError(f"error while storing modules: {exc}") from exc
    connection.commit()