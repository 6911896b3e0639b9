"""Tests for board settings, the registry and session policy."""

import re

import pytest

from board.data.db import StatementBuilder
from board.data.targets import Target
from board.errors import ValidationError
from board.services.board_settings import BoardSettings, parse_setting
from board.services.registry import Registry, decode_value, encode_value
from board.services.session import BotDetector, SessionPolicy, compile_bots


def builder_factory() -> StatementBuilder:
    return StatementBuilder(provider="duckdb", prefix="")


def setting(name: str, value, kind: str, setting_id: int = 1) -> dict:
    return {"id": setting_id, "name": name, "value": value, "default_value": None, "type": kind}


class TestParseSetting:
    def test_bool(self):
        assert parse_setting(setting("a", "true", "bool")).value is True
        assert parse_setting(setting("a", "0", "bool")).value is False

    def test_number(self):
        assert parse_setting(setting("a", " 42 ", "number")).value == 42
        assert parse_setting(setting("a", "abc", "number")).value == -1

    def test_float(self):
        assert parse_setting(setting("a", "2.5", "float")).value == 2.5
        assert parse_setting(setting("a", "", "float")).value == -1.0

    def test_serialized(self):
        assert parse_setting(setting("a", '{"x": [1, 2]}', "serialized")).value == {"x": [1, 2]}
        assert parse_setting(setting("a", "", "serialized")).value is None

    def test_invalid_serialized(self):
        with pytest.raises(ValidationError):
            parse_setting(setting("a", "{nope", "serialized"))

    def test_regexarray(self):
        patterns = parse_setting(setting("a", '["^foo", "bar$"]', "regexarray")).value
        assert all(isinstance(p, re.Pattern) for p in patterns)
        assert patterns[0].search("foobar")

    def test_string_and_unknown_type(self):
        assert parse_setting(setting("a", None, "string")).value == ""
        assert parse_setting(setting("a", "raw", "custom")).value == "raw"


class TestBoardSettings:
    async def test_reload_and_get(self, cache, insert):
        await insert(
            Target.SETTINGS,
            [
                setting("session_duration", "30", "number", 1),
                setting("validate_session_continuity", "false", "bool", 2),
            ],
        )
        await cache.update(Target.SETTINGS)

        board_settings = BoardSettings(cache)
        board_settings.reload()

        assert board_settings.get("session_duration") == 30
        assert board_settings.get("validate_session_continuity") is False
        assert board_settings.get("missing", "fallback") == "fallback"
        assert set(board_settings.all()) == {"session_duration", "validate_session_continuity"}

    def test_exists_requires_string(self, cache):
        with pytest.raises(ValidationError):
            BoardSettings(cache).exists(5)


class TestRegistry:
    @pytest.fixture
    def registry(self, cache, db, clock):
        return Registry(cache, db, builder_factory=builder_factory, clock=clock)

    async def test_set_insert_then_update(self, registry, cache, clock):
        await registry.set("stats", {"posts": 3}, "object")
        assert registry.get("stats") == {"posts": 3}

        clock.advance(5)
        await registry.set("stats", {"posts": 4}, "object")
        assert registry.get("stats") == {"posts": 4}
        assert registry.size() == 1
        assert cache.get(Target.REGISTRY)[0]["last_modification"] == clock.now

    async def test_types(self, registry):
        await registry.set("count", 12, "number")
        await registry.set("enabled", True, "boolean")
        await registry.set("motd", "hello", "string")
        assert registry.get("count") == 12
        assert registry.get("enabled") is True
        assert registry.get("motd") == "hello"

    async def test_invalid_type(self, registry):
        with pytest.raises(ValidationError):
            await registry.set("x", 1, "date")

    async def test_delete_and_clear(self, registry):
        await registry.set("a", "1", "string")
        await registry.set("b", "2", "string")

        assert await registry.delete("a") is True
        assert await registry.delete("a") is False
        assert not registry.exists("a")

        await registry.clear()
        assert registry.size() == 0
        assert registry.get("b", "gone") == "gone"

    def test_codec(self):
        assert encode_value(False, "boolean") == "0"
        assert decode_value("2.5", "number") == 2.5
        assert decode_value(None, "string") is None


class TestBotDetector:
    def test_first_match_wins(self):
        detector = BotDetector(compile_bots([("First", "bot"), ("Second", "Googlebot")]))
        assert detector.detect("Googlebot/2.1").name == "First"

    def test_no_match(self):
        detector = BotDetector(compile_bots([{"name": "Google", "pattern": "Googlebot"}]))
        assert not detector.detect("Firefox").is_bot
        assert not detector.detect(None).is_bot

    def test_invalid_entries_skipped(self):
        assert compile_bots([{"name": "", "pattern": "x"}, {"name": "Ok", "pattern": "ok"}])[0][0] == "Ok"


class TestSessionPolicy:
    async def test_from_settings(self, cache, insert):
        await insert(
            Target.SETTINGS,
            [
                setting("session_duration", "15", "number", 1),
                setting("validate_session_continuity", "false", "bool", 2),
                setting("search_bot_listing", '[{"name": "Bing", "pattern": "bingbot"}]', "serialized", 3),
            ],
        )
        await cache.update(Target.SETTINGS)
        board_settings = BoardSettings(cache)
        board_settings.reload()

        policy = SessionPolicy.from_settings(board_settings)

        assert policy.duration_seconds == 900
        assert policy.enforce_continuity is False
        assert [name for name, _ in policy.bots] == ["Bing"]

    async def test_invalid_duration_falls_back(self, cache, insert, monkeypatch):
        monkeypatch.setattr("settings.SESSION_DURATION_MINUTES", 45)
        await insert(Target.SETTINGS, [setting("session_duration", "-5", "number", 1)])
        await cache.update(Target.SETTINGS)
        board_settings = BoardSettings(cache)
        board_settings.reload()

        assert SessionPolicy.from_settings(board_settings).duration_minutes == 45

    def test_cookie_options_from_configuration(self, cache, monkeypatch):
        monkeypatch.setattr("settings.COOKIE_SECURE", True)
        monkeypatch.setattr("settings.COOKIE_HTTP_ONLY", True)
        monkeypatch.setattr("settings.COOKIE_SAME_SITE", "strict")
        board_settings = BoardSettings(cache)
        board_settings.reload()

        policy = SessionPolicy.from_settings(board_settings)

        assert policy.cookie_options == {"secure": True, "httponly": True, "samesite": "strict"}
