from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Protocol


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS storage (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
);
"""


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


def get_connection(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    conn.executescript(SCHEMA_SQL)
    conn.commit()


class SqliteKeyValueStore:
    """Single-table key/value store.

    A fresh connection is opened per call so the store can be shared with the
    background save/load thread.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        with closing(get_connection(self.db_path)) as conn:
            init_db(conn)

    def get_item(self, key: str) -> str | None:
        with closing(get_connection(self.db_path)) as conn:
            row = conn.execute("SELECT value FROM storage WHERE key=?", (key,)).fetchone()
        return None if row is None else str(row["value"])

    def set_item(self, key: str, value: str) -> None:
        with closing(get_connection(self.db_path)) as conn:
            conn.execute(
                """
                INSERT INTO storage(key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value=excluded.value,
                    updated_at=CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            conn.commit()

    def remove_item(self, key: str) -> None:
        with closing(get_connection(self.db_path)) as conn:
            conn.execute("DELETE FROM storage WHERE key=?", (key,))
            conn.commit()


class MemoryKeyValueStore:
    def __init__(self, items: dict[str, str] | None = None, read_only: bool = False) -> None:
        self.items: dict[str, str] = dict(items or {})
        self.read_only = read_only

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.read_only:
            raise OSError("Storage is read-only")
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        if self.read_only:
            raise OSError("Storage is read-only")
        self.items.pop(key, None)
