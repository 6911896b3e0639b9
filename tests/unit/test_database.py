"""Tests for database providers and provider selection."""

import pytest

from board.data.db import (
    DuckDBProvider,
    SQLiteProvider,
    Statement,
    StatementBuilder,
    WriteResult,
    create_database_provider,
)
from board.errors import ConfigurationError, DatabaseError, ValidationError


def builder() -> StatementBuilder:
    return StatementBuilder(provider="duckdb", prefix="")


class TestDuckDBProvider:
    async def test_read_returns_dicts(self, db):
        await db.query(builder().insert_into("registry", ["name", "value", "type", "last_modification"], ["k", "v", "string", 1]).build())
        rows = await db.query(builder().select(["name", "value"]).from_("registry").build())
        assert rows == [{"name": "k", "value": "v"}]

    async def test_write_returns_affected_rows(self, db):
        result = await db.query(
            builder().insert_into("registry", ["name", "value", "type", "last_modification"], ["k", "v", "string", 1]).build()
        )
        assert isinstance(result, WriteResult)
        assert result.affected_rows == 1

    async def test_empty_table_returns_empty_list(self, db):
        assert await db.query(builder().select().from_("sessions").build()) == []

    async def test_invalid_statement(self, db):
        with pytest.raises(ValidationError):
            await db.query("SELECT 1")
        with pytest.raises(ValidationError):
            await db.query(Statement(""))

    async def test_driver_error_wrapped(self, db):
        with pytest.raises(DatabaseError):
            await db.query(Statement("SELECT * FROM no_such_table"))

    async def test_not_connected(self):
        provider = DuckDBProvider(path=":memory:", prefix="")
        with pytest.raises(DatabaseError):
            await provider.query(Statement("SELECT 1"))

    async def test_disconnect_twice(self):
        provider = DuckDBProvider(path=":memory:", prefix="")
        await provider.connect()
        await provider.disconnect()
        assert not provider.is_connected
        with pytest.raises(DatabaseError):
            await provider.disconnect()


class TestSQLiteProvider:
    async def test_round_trip(self, tmp_path):
        provider = SQLiteProvider(path=str(tmp_path / "board.db"), prefix="bb_")
        await provider.connect()
        await provider.init_tables()

        b = StatementBuilder(provider="sqlite", prefix="bb_")
        result = await provider.query(b.insert_into("user_groups", ["id", "name"], [1, "Guests"]).build())
        rows = await provider.query(b.clear().select(["id", "name"]).from_("user_groups").build())
        await provider.disconnect()

        assert result.affected_rows == 1
        assert rows == [{"id": 1, "name": "Guests"}]


class TestFactory:
    def test_known_providers(self):
        assert isinstance(create_database_provider("duckdb", path=":memory:"), DuckDBProvider)
        assert isinstance(create_database_provider("SQLite", path=":memory:"), SQLiteProvider)

    def test_unsupported_provider(self):
        with pytest.raises(ConfigurationError):
            create_database_provider("mssql")
