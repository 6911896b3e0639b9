"""Cached targets (one per table)."""

from enum import StrEnum

from board.errors import NotFoundError


class Target(StrEnum):
    """Datasets tracked by the cache. Fixed at startup."""

    SESSIONS = "sessions"
    MEMBERS = "members"
    SETTINGS = "settings"
    LOCALES = "locales"
    THEMES = "themes"
    MEMBER_DEVICES = "member_devices"
    GROUPS = "user_groups"
    FEATURES = "features"
    WIDGETS = "widgets"
    REGISTRY = "registry"
    CATEGORIES = "categories"
    FORUMS = "forums"
    TOPICS = "topics"
    POSTS = "posts"
    CONTENT_TRACKER = "content_tracker"

    @classmethod
    def coerce(cls, value: "Target | str") -> "Target":
        """Convert a target name, rejecting anything outside the enumeration."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise NotFoundError(f"Unknown cache target: {value!r}", {"target": value}) from None
