"""Cache provider selection."""

from loguru import logger

import settings
from board.data.cache.base import CacheProvider
from board.data.cache.memory import MemoryCacheProvider
from board.data.db import DatabaseProvider
from board.errors import ConfigurationError

PROVIDERS: dict[str, type[MemoryCacheProvider]] = {
    "memory": MemoryCacheProvider,
}


def create_cache_provider(db: DatabaseProvider, method: str | None = None) -> CacheProvider:
    """Create the cache provider for the given (or configured) method.

    The board cannot read without the cache, so a disabled cache still gets
    the in-memory provider.
    """
    name = (method or settings.CACHE_METHOD or "memory").lower()
    if not settings.CACHE_ENABLED:
        logger.warning("Cache disabled in configuration; using the in-memory provider")
        name = "memory"

    if name not in PROVIDERS:
        raise ConfigurationError(f'Unsupported cache method "{name}"', {"method": name})

    return PROVIDERS[name](db)
