"""Registry - typed key/value pairs persisted in the registry target."""

import json
from collections.abc import Callable
from typing import Any

from loguru import logger

from board.data.cache import CacheProvider
from board.data.db import DatabaseProvider, StatementBuilder
from board.data.targets import Target
from board.errors import ValidationError
from board.helpers import epoch_now

TYPES = ("string", "number", "boolean", "object")


def encode_value(value: Any, kind: str) -> str:
    if kind == "object":
        return json.dumps(value)
    if kind == "boolean":
        return "1" if value else "0"
    return str(value)


def decode_value(raw: str | None, kind: str) -> Any:
    if raw is None:
        return None
    if kind == "object":
        return json.loads(raw)
    if kind == "boolean":
        return raw in ("1", "true", "True")
    if kind == "number":
        number = float(raw)
        return int(number) if number.is_integer() else number
    return raw


class Registry:
    """Write-through registry. Reads come from the cache."""

    def __init__(
        self,
        cache: CacheProvider,
        db: DatabaseProvider,
        builder_factory: Callable[[], StatementBuilder] = StatementBuilder,
        clock: Callable[[], int] = epoch_now,
    ):
        self._cache = cache
        self._db = db
        self._builder_factory = builder_factory
        self._clock = clock

    def _row(self, key: str) -> dict | None:
        return next((r for r in self._cache.get(Target.REGISTRY) if r.get("name") == key), None)

    def exists(self, key: str) -> bool:
        return self._row(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        row = self._row(key)
        if row is None:
            return default
        return decode_value(row.get("value"), row.get("type"))

    def size(self) -> int:
        return len(self._cache.get(Target.REGISTRY))

    async def set(self, key: str, value: Any, kind: str) -> None:
        if kind not in TYPES:
            raise ValidationError(f"Invalid type: {kind}. Valid types are: {', '.join(TYPES)}", {"type": kind})

        logger.debug("Registry: setting {!r} ({})", key, kind)
        builder = self._builder_factory()
        encoded = encode_value(value, kind)
        now = self._clock()

        if self.exists(key):
            statement = (
                builder.update(Target.REGISTRY)
                .set(["value", "last_modification", "type"], [encoded, now, kind])
                .where("name = ?", [key])
                .build()
            )
        else:
            statement = builder.insert_into(
                Target.REGISTRY,
                ["name", "value", "last_modification", "type"],
                [key, encoded, now, kind],
            ).build()

        await self._db.query(statement)
        await self._cache.update(Target.REGISTRY)
        logger.debug("Registry: {!r} updated", key)

    async def delete(self, key: str) -> bool:
        """Delete a key. Returns False when it does not exist."""
        if not self.exists(key):
            logger.debug("Registry: cannot delete {!r}, it does not exist", key)
            return False

        statement = self._builder_factory().delete_from(Target.REGISTRY).where("name = ?", [key]).build()
        await self._db.query(statement)
        await self._cache.update(Target.REGISTRY)
        logger.debug("Registry: {!r} deleted", key)
        return True

    async def clear(self) -> None:
        """Remove every key. Not reversible."""
        await self._db.query(self._builder_factory().delete_from(Target.REGISTRY).build())
        await self._cache.update(Target.REGISTRY)
        logger.info("Registry cleared")
