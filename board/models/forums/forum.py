"""Forum content tables."""

CATEGORIES_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}categories (
    id INTEGER PRIMARY KEY,
    title VARCHAR NOT NULL,
    description VARCHAR,
    sort_order INTEGER NOT NULL DEFAULT 0,
    visible INTEGER NOT NULL DEFAULT 1
)
"""

FORUMS_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}forums (
    id INTEGER PRIMARY KEY,
    category_id INTEGER NOT NULL,
    parent_id INTEGER,
    title VARCHAR NOT NULL,
    description VARCHAR,
    sort_order INTEGER NOT NULL DEFAULT 0,
    visible INTEGER NOT NULL DEFAULT 1
)
"""

TOPICS_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}topics (
    id INTEGER PRIMARY KEY,
    forum_id INTEGER NOT NULL,
    title VARCHAR NOT NULL,
    created_by INTEGER,
    created_at BIGINT,
    locked INTEGER NOT NULL DEFAULT 0,
    pinned INTEGER NOT NULL DEFAULT 0
)
"""

POSTS_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}posts (
    id INTEGER PRIMARY KEY,
    topic_id INTEGER NOT NULL,
    author_id INTEGER,
    content VARCHAR,
    created_at BIGINT,
    updated_at BIGINT
)
"""

CONTENT_TRACKER_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}content_tracker (
    id INTEGER PRIMARY KEY,
    member_id INTEGER NOT NULL,
    topic_id INTEGER NOT NULL,
    last_read BIGINT
)
"""
