"""Database providers."""

from board.data.db.providers.base import DatabaseProvider, WriteResult
from board.data.db.providers.duckdb_provider import DuckDBProvider
from board.data.db.providers.sqlite_provider import SQLiteProvider

__all__ = ["DatabaseProvider", "WriteResult", "DuckDBProvider", "SQLiteProvider"]
