"""Database provider selection."""

from loguru import logger

import settings
from board.data.db.providers import DatabaseProvider, DuckDBProvider, SQLiteProvider
from board.errors import ConfigurationError

PROVIDERS: dict[str, type[DatabaseProvider]] = {
    "duckdb": DuckDBProvider,
    "sqlite": SQLiteProvider,
}


def create_database_provider(name: str | None = None, **kwargs) -> DatabaseProvider:
    """Create the provider for the given (or configured) store identifier."""
    provider = (name or settings.DB_PROVIDER or "").lower()
    if provider not in PROVIDERS:
        raise ConfigurationError(f'Unsupported database type "{name or settings.DB_PROVIDER}"', {"provider": provider})

    instance = PROVIDERS[provider](**kwargs)
    logger.debug("Database provider: {} ({})", provider, instance.path)
    return instance
