"""Base repository class."""

from typing import Any

from loguru import logger

from board.data.cache import CacheProvider
from board.data.targets import Target


class BaseRepository:
    """Read-only access to cached rows. Never queries the database."""

    def __init__(self, cache: CacheProvider):
        self._cache = cache
        logger.debug("{} initialized", self.__class__.__name__)

    def rows(self, target: Target) -> list[dict]:
        """All cached rows of a target."""
        return self._cache.get(target)

    def snapshot(self, **targets: Target) -> dict[str, list[dict]]:
        """Several targets from one cache generation."""
        return self._cache.get_all(targets)

    @staticmethod
    def find_by(rows: list[dict], column: str, value: Any) -> dict | None:
        """First row whose column equals value."""
        return next((row for row in rows if row.get(column) == value), None)
