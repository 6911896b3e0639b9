"""DuckDB provider."""

import duckdb

import settings
from board.data.db.providers.base import DatabaseProvider, WriteResult
from board.data.db.statement import Statement


class DuckDBProvider(DatabaseProvider):
    """Single DuckDB connection."""

    name = "duckdb"

    def __init__(self, path: str | None = None, prefix: str | None = None):
        super().__init__(path or settings.DUCKDB_PATH, prefix)

    def _open(self) -> duckdb.DuckDBPyConnection:
        return duckdb.connect(self._path)

    def _run_statement(self, statement: Statement) -> duckdb.DuckDBPyConnection:
        if statement.parameters:
            return self._conn.execute(statement.text, list(statement.parameters))
        return self._conn.execute(statement.text)

    def _fetch(self, statement: Statement) -> list[dict]:
        result = self._run_statement(statement)
        columns = [d[0] for d in result.description]
        return [dict(zip(columns, row)) for row in result.fetchall()]

    def _execute(self, statement: Statement) -> WriteResult:
        result = self._run_statement(statement)
        # DML returns a single "Count" row
        row = result.fetchone() if result.description else None
        return WriteResult(affected_rows=int(row[0]) if row else 0)

    def _script(self, sql: str) -> None:
        self._conn.execute(sql)

    def _close(self) -> None:
        self._conn.close()
