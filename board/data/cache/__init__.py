"""Cache providers."""

from board.data.cache.base import CacheProvider
from board.data.cache.factory import create_cache_provider
from board.data.cache.memory import MemoryCacheProvider

__all__ = ["CacheProvider", "MemoryCacheProvider", "create_cache_provider"]
