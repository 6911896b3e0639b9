"""Database access - statement builder and providers."""

from board.data.db.factory import create_database_provider
from board.data.db.providers import DatabaseProvider, DuckDBProvider, SQLiteProvider, WriteResult
from board.data.db.statement import Statement, StatementBuilder, resolve_table_prefix

__all__ = [
    # Builder
    "Statement",
    "StatementBuilder",
    "resolve_table_prefix",
    # Providers
    "DatabaseProvider",
    "DuckDBProvider",
    "SQLiteProvider",
    "WriteResult",
    "create_database_provider",
]
