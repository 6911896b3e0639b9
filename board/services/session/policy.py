"""Session policy and search-bot detection."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

import settings
from board.services.board_settings import BoardSettings

DEFAULT_BOTS = [
    {"name": "Google", "pattern": r"Googlebot"},
    {"name": "Bing", "pattern": r"bingbot"},
    {"name": "DuckDuckGo", "pattern": r"DuckDuckBot"},
    {"name": "Yandex", "pattern": r"YandexBot"},
    {"name": "Baidu", "pattern": r"Baiduspider"},
    {"name": "Yahoo", "pattern": r"Yahoo! Slurp"},
]


@dataclass(frozen=True)
class BotMatch:
    is_bot: bool = False
    name: str | None = None


class BotDetector:
    """User-agent matching against a configured bot list. First match wins."""

    def __init__(self, bots: Iterable[tuple[str, re.Pattern]] = ()):
        self._bots = list(bots)

    def detect(self, user_agent: str | None) -> BotMatch:
        if not user_agent:
            return BotMatch()
        for name, pattern in self._bots:
            if pattern.search(user_agent):
                return BotMatch(is_bot=True, name=name)
        return BotMatch()


def compile_bots(entries: Iterable[Any]) -> list[tuple[str, re.Pattern]]:
    """Accepts {"name", "pattern"} dicts or (name, pattern) pairs."""
    bots = []
    for entry in entries or []:
        if isinstance(entry, dict):
            name, pattern = entry.get("name"), entry.get("pattern")
        else:
            name, pattern = entry
        if not name or not pattern:
            logger.warning("Skipping invalid bot entry: {}", entry)
            continue
        bots.append((name, pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)))
    return bots


@dataclass
class SessionPolicy:
    """Knobs the lifecycle consumes but does not own."""

    duration_minutes: int = settings.SESSION_DURATION_MINUTES
    enforce_continuity: bool = settings.SESSION_VALIDATE_CONTINUITY
    bots: list[tuple[str, re.Pattern]] = field(default_factory=lambda: compile_bots(DEFAULT_BOTS))
    auth_cookie: str = settings.AUTH_TOKEN_COOKIE
    redirect_to: str = "/"
    cookie_secure: bool = settings.COOKIE_SECURE
    cookie_http_only: bool = settings.COOKIE_HTTP_ONLY
    cookie_same_site: str = settings.COOKIE_SAME_SITE

    @property
    def duration_seconds(self) -> int:
        return self.duration_minutes * 60

    @property
    def cookie_options(self) -> dict:
        """Attributes the HTTP layer applies when setting or expiring cookies."""
        return {
            "secure": self.cookie_secure,
            "httponly": self.cookie_http_only,
            "samesite": self.cookie_same_site,
        }

    @classmethod
    def from_settings(cls, board_settings: BoardSettings) -> "SessionPolicy":
        """Database settings first, process configuration as fallback."""
        duration = board_settings.get("session_duration", settings.SESSION_DURATION_MINUTES)
        if not isinstance(duration, int) or duration <= 0:
            logger.warning("Invalid session_duration {!r}, using {}", duration, settings.SESSION_DURATION_MINUTES)
            duration = settings.SESSION_DURATION_MINUTES

        return cls(
            duration_minutes=duration,
            enforce_continuity=bool(
                board_settings.get("validate_session_continuity", settings.SESSION_VALIDATE_CONTINUITY)
            ),
            bots=compile_bots(board_settings.get("search_bot_listing", DEFAULT_BOTS)),
            auth_cookie=settings.AUTH_TOKEN_COOKIE,
            cookie_secure=settings.COOKIE_SECURE,
            cookie_http_only=settings.COOKIE_HTTP_ONLY,
            cookie_same_site=settings.COOKIE_SAME_SITE,
        )
