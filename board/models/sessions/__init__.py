"""Session models."""

from board.models.sessions.session import SESSION_COLUMNS, SESSIONS_DDL, SessionRecord

__all__ = ["SESSIONS_DDL", "SESSION_COLUMNS", "SessionRecord"]
