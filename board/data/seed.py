"""Default rows for an empty board."""

import json
from collections.abc import Callable

from loguru import logger

from board.data.cache import CacheProvider
from board.data.db import DatabaseProvider, StatementBuilder
from board.data.targets import Target
from board.services.session.policy import DEFAULT_BOTS

DEFAULT_GROUPS = [
    # id, name, sort_order, is_moderator, is_admin
    (1, "Guests", 1, 0, 0),
    (2, "Members", 2, 0, 0),
    (3, "Moderators", 3, 1, 0),
    (4, "Administrators", 4, 1, 1),
]

DEFAULT_SETTINGS = [
    # id, name, value, type, category
    (1, "session_duration", "60", "number", "sessions"),
    (2, "validate_session_continuity", "true", "bool", "sessions"),
    (3, "search_bot_listing", json.dumps(DEFAULT_BOTS), "serialized", "sessions"),
    (4, "guest_group_id", "1", "number", "members"),
]


async def seed_defaults(
    db: DatabaseProvider,
    cache: CacheProvider,
    builder_factory: Callable[[], StatementBuilder] = StatementBuilder,
) -> list[Target]:
    """Insert default groups and settings into empty tables. Returns targets written."""
    written: list[Target] = []

    if not cache.get(Target.GROUPS):
        for group_id, name, sort_order, is_moderator, is_admin in DEFAULT_GROUPS:
            await db.query(
                builder_factory()
                .insert_into(
                    Target.GROUPS,
                    ["id", "name", "sort_order", "is_moderator", "is_admin"],
                    [group_id, name, sort_order, is_moderator, is_admin],
                )
                .build()
            )
        written.append(Target.GROUPS)

    if not cache.get(Target.SETTINGS):
        for setting_id, name, value, kind, category in DEFAULT_SETTINGS:
            await db.query(
                builder_factory()
                .insert_into(
                    Target.SETTINGS,
                    ["id", "name", "value", "default_value", "type", "category"],
                    [setting_id, name, value, value, kind, category],
                )
                .build()
            )
        written.append(Target.SETTINGS)

    if written:
        await cache.update_all(written)
        logger.info("Seeded defaults: {}", ", ".join(written))

    return written
