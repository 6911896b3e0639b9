"""SQLite provider."""

import sqlite3

import settings
from board.data.db.providers.base import DatabaseProvider, WriteResult
from board.data.db.statement import Statement


class SQLiteProvider(DatabaseProvider):
    """Single SQLite connection in autocommit mode."""

    name = "sqlite"

    def __init__(self, path: str | None = None, prefix: str | None = None):
        super().__init__(path or settings.SQLITE_PATH, prefix)

    def _open(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._path, check_same_thread=False, isolation_level=None)
        conn.row_factory = sqlite3.Row
        return conn

    def _fetch(self, statement: Statement) -> list[dict]:
        cursor = self._conn.execute(statement.text, statement.parameters)
        return [dict(row) for row in cursor.fetchall()]

    def _execute(self, statement: Statement) -> WriteResult:
        cursor = self._conn.execute(statement.text, statement.parameters)
        return WriteResult(affected_rows=max(cursor.rowcount, 0))

    def _script(self, sql: str) -> None:
        self._conn.execute(sql)

    def _close(self) -> None:
        self._conn.close()
