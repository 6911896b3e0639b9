"""In-memory full-dataset cache."""

import asyncio
from collections.abc import Callable, Iterable, Mapping

from loguru import logger

from board.data.cache.base import CacheProvider
from board.data.db import DatabaseProvider, StatementBuilder
from board.data.targets import Target
from board.errors import CacheBuildError, ValidationError


class MemoryCacheProvider(CacheProvider):
    """Whole-table snapshot per target.

    A refresh replaces the target's list in a single assignment; readers
    holding the previous list keep iterating it unaffected.
    """

    def __init__(
        self,
        db: DatabaseProvider,
        targets: Iterable[Target] = Target,
        builder_factory: Callable[[], StatementBuilder] = StatementBuilder,
    ):
        self._db = db
        self._targets = tuple(Target.coerce(t) for t in targets)
        self._builder_factory = builder_factory
        self._cache: dict[Target, list[dict]] = {}
        self._built = False
        logger.debug("{} initialized ({} targets)", self.__class__.__name__, len(self._targets))

    @property
    def targets(self) -> tuple[Target, ...]:
        return self._targets

    @property
    def is_built(self) -> bool:
        return self._built

    async def build(self) -> None:
        logger.info("Building the cache...")
        try:
            await asyncio.gather(*(self.update(target) for target in self._targets))
        except Exception as e:
            logger.error("The cache building process failed: {}", e)
            raise CacheBuildError(f"The cache building process failed: {e}") from e

        self._built = True
        logger.info("Cache built: {} targets, {} rows", len(self._cache), sum(len(r) for r in self._cache.values()))

    async def update(self, target: Target | str) -> None:
        target = Target.coerce(target)
        statement = self._builder_factory().select().from_(target).build()

        try:
            rows = await self._db.query(statement)
        except Exception as e:
            logger.error("Failed to update cache for target {}: {}", target, e)
            raise

        if not rows:
            logger.warning("No data returned for target: {}", target)

        self._cache[target] = list(rows or [])
        logger.debug("Cache updated: {} ({} rows)", target, len(self._cache[target]))

    async def update_all(self, targets: Iterable[Target | str]) -> None:
        if isinstance(targets, (str, bytes)) or not isinstance(targets, Iterable):
            raise ValidationError("update_all() expects a list of targets")

        for target in list(targets):
            await self.update(target)

    def get(self, target: Target | str) -> list[dict]:
        target = Target.coerce(target)
        return list(self._cache.get(target, ()))

    def get_all(self, target_map: Mapping[str, Target | str]) -> dict[str, list[dict]]:
        if not isinstance(target_map, Mapping):
            raise ValidationError("get_all() expects a mapping of alias to target")

        return {alias: self.get(target) for alias, target in target_map.items()}
