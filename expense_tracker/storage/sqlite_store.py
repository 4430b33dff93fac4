# expense_tracker/storage/sqlite_store.py
from __future__ import annotations

import sqlite3
from pathlib import Path

from expense_tracker.errors import StorageError
from expense_tracker.storage.base import BaseStore


def _init_db(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS kv (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
        """
    )
    conn.commit()


class SqliteStore(BaseStore):
    """Key-value pairs in a single SQLite table."""

    def __init__(self, config=None, path: str | Path | None = None):
        config = config or {}
        self.path = Path(path or config.get('storage_path', 'expenses.db'))

    def _connect(self) -> sqlite3.Connection:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.path)
        _init_db(conn)
        return conn

    def get(self, key: str) -> str | None:
        try:
            conn = self._connect()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open {self.path}: {exc}") from exc
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot read {key!r} from {self.path}: {exc}") from exc
        finally:
            conn.close()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            conn = self._connect()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open {self.path}: {exc}") from exc
        try:
            conn.execute(
                """
                INSERT INTO kv (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot write {key!r} to {self.path}: {exc}") from exc
        finally:
            conn.close()
