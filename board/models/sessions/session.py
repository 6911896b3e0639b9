"""Session table and record."""

from dataclasses import dataclass

from board.models.common import BaseEntity
from board.models.members.member import GUEST_MEMBER_ID

SESSIONS_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}sessions (
    id VARCHAR PRIMARY KEY,
    member_id INTEGER NOT NULL DEFAULT 0,
    expires BIGINT NOT NULL,
    last_click BIGINT NOT NULL,
    location VARCHAR,
    ip_address VARCHAR,
    hostname VARCHAR,
    user_agent VARCHAR,
    display_on_whos_online INTEGER NOT NULL DEFAULT 0,
    is_bot INTEGER NOT NULL DEFAULT 0,
    bot_name VARCHAR,
    is_admin INTEGER NOT NULL DEFAULT 0
)
"""

# Persisted as 0/1 integers.
_BOOL_COLUMNS = ("display_on_whos_online", "is_bot", "is_admin")


@dataclass
class SessionRecord(BaseEntity):
    """One client's active session. Timestamps are epoch seconds."""

    id: str
    member_id: int = GUEST_MEMBER_ID
    expires: int = 0
    last_click: int = 0
    location: str | None = None
    ip_address: str | None = None
    hostname: str | None = None
    user_agent: str | None = None
    display_on_whos_online: bool = False
    is_bot: bool = False
    bot_name: str | None = None
    is_admin: bool = False

    @property
    def is_guest(self) -> bool:
        return self.member_id == GUEST_MEMBER_ID

    def is_expired(self, now: int) -> bool:
        return self.expires <= now

    @classmethod
    def from_row(cls, row: dict) -> "SessionRecord":
        """Build from a cached row."""
        values = {name: row.get(name) for name in cls.field_names() if name in row}
        values["member_id"] = int(values.get("member_id") or GUEST_MEMBER_ID)
        values["expires"] = int(values.get("expires") or 0)
        values["last_click"] = int(values.get("last_click") or 0)
        for column in _BOOL_COLUMNS:
            values[column] = bool(values.get(column))
        return cls(**values)

    def to_row(self) -> dict:
        """Row dict in column order, booleans as integers."""
        row = self.to_dict()
        for column in _BOOL_COLUMNS:
            row[column] = 1 if row[column] else 0
        return row


SESSION_COLUMNS = SessionRecord.field_names()
