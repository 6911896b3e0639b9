"""Member models - members, devices and groups."""

from board.models.members.entities import Member, MemberDevice
from board.models.members.member import GROUPS_DDL, GUEST_MEMBER_ID, MEMBER_DEVICES_DDL, MEMBERS_DDL

__all__ = [
    "MEMBERS_DDL",
    "MEMBER_DEVICES_DDL",
    "GROUPS_DDL",
    "GUEST_MEMBER_ID",
    "Member",
    "MemberDevice",
]
