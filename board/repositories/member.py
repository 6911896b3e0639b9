"""Member repository - members, groups and devices from the cache."""

from loguru import logger

from board.data.targets import Target
from board.models import GUEST_MEMBER_ID, Member, MemberDevice
from board.repositories.base import BaseRepository


def build_member(row: dict | None, groups: list[dict]) -> Member:
    """Member entity from a cached row; guest when row is missing."""
    if not row:
        return Member()

    group = BaseRepository.find_by(groups, "id", row.get("primary_group_id"))
    return Member(
        id=int(row["id"]),
        username=row["username"],
        display_name=row.get("display_name") or row["username"],
        primary_group_id=row.get("primary_group_id"),
        display_on_whos_online=bool(row.get("display_on_whos_online")),
        is_admin=bool(group and group.get("is_admin")),
    )


class MemberRepository(BaseRepository):
    """Member lookups."""

    def get_by_id(self, member_id: int) -> Member:
        """Member by id, falling back to the guest member."""
        if member_id == GUEST_MEMBER_ID:
            return Member()

        data = self.snapshot(members=Target.MEMBERS, groups=Target.GROUPS)
        row = self.find_by(data["members"], "id", member_id)
        if row is None:
            logger.debug("Member {} not found, using guest", member_id)
        return build_member(row, data["groups"])

    def exists(self, member_id: int) -> bool:
        return self.find_by(self.rows(Target.MEMBERS), "id", member_id) is not None


class DeviceRepository(BaseRepository):
    """Auth device token lookups."""

    @staticmethod
    def find_token(rows: list[dict], token: str | None) -> MemberDevice | None:
        """Device for a token within already-read device rows."""
        if not token:
            return None
        row = BaseRepository.find_by(rows, "token", token)
        return MemberDevice.from_row(row) if row else None

    def get_by_token(self, token: str | None) -> MemberDevice | None:
        return self.find_token(self.rows(Target.MEMBER_DEVICES), token)
