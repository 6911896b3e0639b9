"""Forum models - categories, forums, topics, posts, read tracking."""

from board.models.forums.forum import (
    CATEGORIES_DDL,
    CONTENT_TRACKER_DDL,
    FORUMS_DDL,
    POSTS_DDL,
    TOPICS_DDL,
)

__all__ = [
    "CATEGORIES_DDL",
    "FORUMS_DDL",
    "TOPICS_DDL",
    "POSTS_DDL",
    "CONTENT_TRACKER_DDL",
]
