"""Tests for the SQL statement builder."""

import pytest

import settings
from board.data.db import Statement, StatementBuilder
from board.data.targets import Target
from board.errors import ConfigurationError, ValidationError


class TestPrefix:
    def test_prefix_applied_to_tables(self):
        builder = StatementBuilder(provider="duckdb", prefix="bb_")
        stmt = builder.select().from_("sessions").join("LEFT", "members", "bb_members.id = bb_sessions.member_id").build()
        assert stmt.text == "SELECT * FROM bb_sessions LEFT JOIN bb_members ON bb_members.id = bb_sessions.member_id"

    def test_prefix_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "DB_PROVIDER", "sqlite")
        monkeypatch.setattr(settings, "SQLITE_TABLE_PREFIX", "eb_")
        assert StatementBuilder().prefix == "eb_"

    def test_unsupported_provider_fails_construction(self):
        with pytest.raises(ConfigurationError):
            StatementBuilder(provider="oracle")

    def test_unsupported_configured_provider(self, monkeypatch):
        monkeypatch.setattr(settings, "DB_PROVIDER", "mongodb")
        with pytest.raises(ConfigurationError):
            StatementBuilder()


class TestSelect:
    def test_select_columns_list(self, builder):
        stmt = builder.select(["id", "name"]).from_(Target.FORUMS).build()
        assert stmt.text == "SELECT id, name FROM forums"
        assert stmt.parameters == ()

    def test_distinct(self, builder):
        assert builder.select("member_id").distinct().from_("sessions").build().text == (
            "SELECT DISTINCT member_id FROM sessions"
        )

    def test_distinct_requires_select(self, builder):
        with pytest.raises(ValidationError):
            builder.distinct()
        assert builder.text == ""

    def test_where_chain_binds_in_order(self, builder):
        stmt = (
            builder.select()
            .from_("topics")
            .where("forum_id = ?", 3)
            .and_where("locked = ?", 0)
            .or_where("pinned = ?", 1)
            .build()
        )
        assert stmt.text == "SELECT * FROM topics WHERE forum_id = ? AND locked = ? OR pinned = ?"
        assert stmt.parameters == (3, 0, 1)

    def test_where_list_values(self, builder):
        stmt = builder.select().from_("posts").where("topic_id = ? AND author_id = ?", [7, 9]).build()
        assert stmt.parameters == (7, 9)

    def test_where_without_values(self, builder):
        stmt = builder.select().from_("forums").where("parent_id IS NULL").build()
        assert stmt.parameters == ()

    def test_group_having_order_limit_offset(self, builder):
        stmt = (
            builder.select(["forum_id", "COUNT(*)"])
            .from_("topics")
            .group_by("forum_id")
            .having("COUNT(*) > ?", 5)
            .order_by(["forum_id"], "desc")
            .limit(10)
            .offset(20)
            .build()
        )
        assert stmt.text == (
            "SELECT forum_id, COUNT(*) FROM topics GROUP BY forum_id HAVING COUNT(*) > ? "
            "ORDER BY forum_id DESC LIMIT ? OFFSET ?"
        )
        assert stmt.parameters == (5, 10, 20)

    def test_invalid_direction(self, builder):
        with pytest.raises(ValidationError):
            builder.order_by("id", "sideways")


class TestIn:
    def test_in_binds_each_value(self, builder):
        stmt = builder.select().from_("members").only_where().in_("id", [1, 2, 3]).build()
        assert stmt.text == "SELECT * FROM members WHERE id IN (?, ?, ?)"
        assert stmt.parameters == (1, 2, 3)

    def test_in_empty_raises(self, builder):
        with pytest.raises(ValidationError):
            builder.in_("id", [])

    def test_in_non_list_raises(self, builder):
        with pytest.raises(ValidationError):
            builder.in_("id", 5)

    def test_in_failure_leaves_buffers_untouched(self, builder):
        builder.select().from_("members").only_where()
        with pytest.raises(ValidationError):
            builder.in_("id", [])
        assert builder.text == "SELECT * FROM members WHERE "
        assert builder.parameters == []


class TestBetween:
    def test_two_values(self, builder):
        stmt = builder.select().from_("posts").only_where().between("created_at", ["a", "b"]).build()
        assert stmt.text == "SELECT * FROM posts WHERE created_at BETWEEN ? AND ?"
        assert stmt.parameters == ("a", "b")

    def test_one_value_raises(self, builder):
        with pytest.raises(ValidationError):
            builder.between("created_at", ["a"])

    def test_three_values_raises(self, builder):
        with pytest.raises(ValidationError):
            builder.between("created_at", ["a", "b", "c"])


class TestWrites:
    def test_insert(self, builder):
        stmt = builder.insert_into("registry", ["name", "value"], ["k", "v"]).build()
        assert stmt.text == "INSERT INTO registry (name, value) VALUES (?, ?)"
        assert stmt.parameters == ("k", "v")

    def test_insert_empty_values_raises(self, builder):
        with pytest.raises(ValidationError):
            builder.insert_into("registry", ["name"], [])

    def test_insert_length_mismatch_raises(self, builder):
        with pytest.raises(ValidationError):
            builder.insert_into("registry", ["name", "value"], ["k"])

    def test_update_set(self, builder):
        stmt = builder.update("sessions").set(["x", "y"], [1, 2]).where("id = ?", ["abc"]).build()
        assert stmt.text == "UPDATE sessions SET x = ?, y = ? WHERE id = ?"
        assert stmt.parameters == (1, 2, "abc")

    def test_set_length_mismatch_raises(self, builder):
        with pytest.raises(ValidationError):
            builder.update("sessions").set(["x", "y"], [1])

    def test_delete(self, builder):
        stmt = builder.delete_from("sessions").where("id = ?", "abc").build()
        assert stmt.text == "DELETE FROM sessions WHERE id = ?"
        assert stmt.parameters == ("abc",)

    def test_on_duplicate_key_update(self, builder):
        stmt = builder.insert_into("registry", ["name", "value"], ["k", "v"]).on_duplicate_key_update(["value"]).build()
        assert stmt.text.endswith("ON DUPLICATE KEY UPDATE value = VALUES(value)")

    def test_on_duplicate_key_update_requires_list(self, builder):
        with pytest.raises(ValidationError):
            builder.on_duplicate_key_update("value")


class TestBuildAndClear:
    def test_build_does_not_mutate(self, builder):
        builder.select().from_("sessions").where("id = ?", "a")
        first = builder.build()
        second = builder.build()
        assert first == second
        assert builder.parameters == ["a"]

    def test_clear_resets_for_reuse(self, builder):
        first = builder.select().from_("sessions").where("id = ?", "a").build()
        second = builder.clear().delete_from("posts").where("id = ?", 1).build()
        assert first.parameters == ("a",)
        assert second == Statement("DELETE FROM posts WHERE id = ?", (1,))

    def test_placeholders_match_parameters(self, builder):
        stmt = (
            builder.update("sessions")
            .set(["location", "last_click"], ["/", 10])
            .where("member_id = ?", 3)
            .and_where("expires > ?", 5)
            .build()
        )
        assert stmt.text.count("?") == len(stmt.parameters)

    def test_is_read(self):
        assert Statement("SELECT 1").is_read
        assert Statement("  with x as (select 1) select * from x").is_read
        assert not Statement("DELETE FROM sessions").is_read
