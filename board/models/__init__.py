"""Models package - DDL and entities for all targets."""

from board.data.targets import Target
from board.models.common import (
    FEATURES_DDL,
    LOCALES_DDL,
    REGISTRY_DDL,
    SETTINGS_DDL,
    THEMES_DDL,
    WIDGETS_DDL,
    BaseEntity,
    render_ddl,
)
from board.models.forums import (
    CATEGORIES_DDL,
    CONTENT_TRACKER_DDL,
    FORUMS_DDL,
    POSTS_DDL,
    TOPICS_DDL,
)
from board.models.members import (
    GROUPS_DDL,
    GUEST_MEMBER_ID,
    MEMBER_DEVICES_DDL,
    MEMBERS_DDL,
    Member,
    MemberDevice,
)
from board.models.sessions import SESSION_COLUMNS, SESSIONS_DDL, SessionRecord

TARGET_DDL = {
    # Sessions
    Target.SESSIONS: SESSIONS_DDL,
    # Members
    Target.MEMBERS: MEMBERS_DDL,
    Target.MEMBER_DEVICES: MEMBER_DEVICES_DDL,
    Target.GROUPS: GROUPS_DDL,
    # System
    Target.SETTINGS: SETTINGS_DDL,
    Target.LOCALES: LOCALES_DDL,
    Target.THEMES: THEMES_DDL,
    Target.FEATURES: FEATURES_DDL,
    Target.WIDGETS: WIDGETS_DDL,
    Target.REGISTRY: REGISTRY_DDL,
    # Forums
    Target.CATEGORIES: CATEGORIES_DDL,
    Target.FORUMS: FORUMS_DDL,
    Target.TOPICS: TOPICS_DDL,
    Target.POSTS: POSTS_DDL,
    Target.CONTENT_TRACKER: CONTENT_TRACKER_DDL,
}

ALL_DDL = list(TARGET_DDL.values())

__all__ = [
    "BaseEntity",
    "render_ddl",
    "Member",
    "MemberDevice",
    "SessionRecord",
    "SESSION_COLUMNS",
    "GUEST_MEMBER_ID",
    "TARGET_DDL",
    "ALL_DDL",
]
