"""Shared fixtures: in-memory DuckDB, built cache, fixed clock."""

import pytest
import pytest_asyncio

from board.data.cache import MemoryCacheProvider
from board.data.db import DuckDBProvider, StatementBuilder
from board.data.targets import Target

NOW = 1_700_000_000


class FixedClock:
    """Callable clock returning a settable epoch."""

    def __init__(self, now: int = NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


def duckdb_builder() -> StatementBuilder:
    return StatementBuilder(provider="duckdb", prefix="")


@pytest.fixture
def builder() -> StatementBuilder:
    return duckdb_builder()


@pytest_asyncio.fixture
async def db():
    provider = DuckDBProvider(path=":memory:", prefix="")
    await provider.connect()
    await provider.init_tables()
    yield provider
    await provider.disconnect()


@pytest_asyncio.fixture
async def cache(db):
    provider = MemoryCacheProvider(db, builder_factory=duckdb_builder)
    await provider.build()
    return provider


@pytest.fixture
def insert(db):
    """Insert raw rows into a target, bypassing the cache."""

    async def _insert(target: Target, rows: list[dict]) -> None:
        for row in rows:
            columns = list(row)
            statement = duckdb_builder().insert_into(target, columns, [row[c] for c in columns])
            await db.query(statement.build())

    return _insert
