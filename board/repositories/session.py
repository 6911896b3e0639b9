"""Session repository - cached session rows."""

from board.data.targets import Target
from board.models import SessionRecord
from board.repositories.base import BaseRepository


class SessionRepository(BaseRepository):
    """Lookups over the sessions target."""

    def get_by_id(self, session_id: str) -> SessionRecord | None:
        row = self.find_by(self.rows(Target.SESSIONS), "id", session_id)
        return SessionRecord.from_row(row) if row else None

    def get_active(self, now: int) -> list[SessionRecord]:
        """Sessions not yet expired, most recent click first."""
        records = [SessionRecord.from_row(r) for r in self.rows(Target.SESSIONS)]
        active = [r for r in records if not r.is_expired(now)]
        return sorted(active, key=lambda r: r.last_click, reverse=True)

    def get_expired(self, now: int) -> list[SessionRecord]:
        records = [SessionRecord.from_row(r) for r in self.rows(Target.SESSIONS)]
        return [r for r in records if r.is_expired(now)]
