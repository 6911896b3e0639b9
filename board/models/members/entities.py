"""Member domain entities."""

from dataclasses import dataclass

from board.models.common import BaseEntity
from board.models.members.member import GUEST_MEMBER_ID


@dataclass
class Member(BaseEntity):
    """Resolved member (or guest) for the current request."""

    id: int = GUEST_MEMBER_ID
    username: str = "Guest"
    display_name: str = "Guest"
    primary_group_id: int | None = None
    display_on_whos_online: bool = False
    is_admin: bool = False
    signed_in: bool = False

    @property
    def is_guest(self) -> bool:
        return self.id == GUEST_MEMBER_ID


@dataclass
class MemberDevice(BaseEntity):
    """Long-lived auth token bound to a member."""

    id: int
    member_id: int
    token: str
    created_at: int | None = None
    last_used: int | None = None

    @classmethod
    def from_row(cls, row: dict) -> "MemberDevice":
        return cls(
            id=int(row["id"]),
            member_id=int(row["member_id"]),
            token=row["token"],
            created_at=row.get("created_at"),
            last_used=row.get("last_used"),
        )
