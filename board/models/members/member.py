"""Member, device and group tables."""

MEMBERS_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}members (
    id INTEGER PRIMARY KEY,
    username VARCHAR NOT NULL UNIQUE,
    display_name VARCHAR,
    email_address VARCHAR,
    primary_group_id INTEGER,
    display_on_whos_online INTEGER NOT NULL DEFAULT 1,
    locale_id INTEGER,
    theme_id INTEGER,
    joined BIGINT
)
"""

MEMBER_DEVICES_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}member_devices (
    id INTEGER PRIMARY KEY,
    member_id INTEGER NOT NULL,
    token VARCHAR NOT NULL UNIQUE,
    created_at BIGINT,
    last_used BIGINT
)
"""

GROUPS_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}user_groups (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    description VARCHAR,
    sort_order INTEGER NOT NULL DEFAULT 0,
    is_moderator INTEGER NOT NULL DEFAULT 0,
    is_admin INTEGER NOT NULL DEFAULT 0
)
"""

# Member id used for guests; never present in the members table.
GUEST_MEMBER_ID = 0
