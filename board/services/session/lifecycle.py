"""Session lifecycle - keeps the sessions table, its cache target and the
client cookie/session object consistent across requests.

Each request runs garbage collection, then resolves exactly one of create,
update or destroy:

    device cookie  | device row | session row        | result
    ---------------+------------+--------------------+----------------------------
    present        | found      | same member        | update (continuity checked)
    present        | found      | none / other owner | create for the member
    present        | missing    | any                | destroy + redirect
    absent         | -          | found              | update (continuity checked)
    absent         | -          | none               | create guest

Database failures are logged and swallowed; a session that fails to persist
is re-created on the next request. Background (ajax) requests never create or
update rows.
"""

from collections.abc import Callable

from loguru import logger

from board.data.cache import CacheProvider
from board.data.db import DatabaseProvider, Statement, StatementBuilder
from board.data.targets import Target
from board.errors import DatabaseError, NotFoundError
from board.helpers import epoch_now
from board.models import SESSION_COLUMNS, Member, SessionRecord
from board.repositories import BaseRepository, DeviceRepository, MemberRepository, SessionRepository, build_member
from board.services.session.context import RequestContext, SessionOutcome, SessionState
from board.services.session.policy import BotDetector, SessionPolicy

_UPDATE_COLUMNS = [c for c in SESSION_COLUMNS if c != "id"]


def state_for(record: SessionRecord) -> SessionState:
    return SessionState.GUEST if record.is_guest else SessionState.MEMBER


class SessionLifecycle:
    """Request-scoped session state machine."""

    def __init__(
        self,
        cache: CacheProvider,
        db: DatabaseProvider,
        policy: SessionPolicy | None = None,
        builder_factory: Callable[[], StatementBuilder] = StatementBuilder,
        clock: Callable[[], int] = epoch_now,
    ):
        self._cache = cache
        self._db = db
        self._policy = policy or SessionPolicy()
        self._builder_factory = builder_factory
        self._clock = clock
        self._bots = BotDetector(self._policy.bots)
        self._sessions = SessionRepository(cache)
        self._members = MemberRepository(cache)
        logger.debug("SessionLifecycle initialized (duration={}m, continuity={})",
                     self._policy.duration_minutes, self._policy.enforce_continuity)

    @property
    def policy(self) -> SessionPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Request entry point
    # ------------------------------------------------------------------

    async def handle(self, ctx: RequestContext) -> SessionOutcome:
        """Reconcile the request's cookies with the persisted session."""
        await self.collect_garbage()

        data = self._cache.get_all(
            {
                "sessions": Target.SESSIONS,
                "devices": Target.MEMBER_DEVICES,
                "members": Target.MEMBERS,
                "groups": Target.GROUPS,
            }
        )
        row = BaseRepository.find_by(data["sessions"], "id", ctx.session.id)
        record = SessionRecord.from_row(row) if row else None

        if record is not None and record.is_expired(self._clock()):
            logger.debug("Session {} expired but not yet collected", record.id)
            await self._delete_row(record.id, "expired session")
            record = None

        token = ctx.cookies.get(self._policy.auth_cookie)
        if token:
            return await self._handle_token(ctx, token, record, data)

        if record is None:
            return await self.create(ctx)

        if not self._is_continuous(record, ctx):
            return await self.destroy(ctx, redirect=True)

        member_row = None if record.is_guest else BaseRepository.find_by(data["members"], "id", record.member_id)
        member = build_member(member_row, data["groups"]) if member_row else None
        return await self.update(ctx, record, member)

    async def _handle_token(
        self,
        ctx: RequestContext,
        token: str,
        record: SessionRecord | None,
        data: dict[str, list[dict]],
    ) -> SessionOutcome:
        device = DeviceRepository.find_token(data["devices"], token)
        member_row = BaseRepository.find_by(data["members"], "id", device.member_id) if device else None

        if member_row is None:
            logger.info("Auth token did not resolve to a member; destroying session {}", ctx.session.id)
            return await self.destroy(ctx, redirect=True)

        member = build_member(member_row, data["groups"])
        member.signed_in = True

        if record is not None and record.member_id == member.id:
            if not self._is_continuous(record, ctx):
                return await self.destroy(ctx, redirect=True)
            return await self.update(ctx, record, member)

        if ctx.is_ajax:
            # Promotion waits for the next full page request.
            if record is None:
                return SessionOutcome(SessionState.NO_SESSION)
            return SessionOutcome(state_for(record), record)

        if record is not None:
            # Guest (or foreign) row under this session id; replace it with the member's.
            await self._delete_row(record.id, "session promotion")

        return await self.create(ctx, member)

    def _is_continuous(self, record: SessionRecord, ctx: RequestContext) -> bool:
        if not self._policy.enforce_continuity:
            return True
        if record.ip_address != ctx.ip_address or record.user_agent != ctx.user_agent:
            logger.warning(
                "Session {} failed continuity check (ip {} -> {})",
                record.id,
                record.ip_address,
                ctx.ip_address,
            )
            return False
        return True

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def create(self, ctx: RequestContext, member: Member | None = None) -> SessionOutcome:
        """Insert a new session row for the request's session id."""
        if ctx.is_ajax:
            return SessionOutcome(SessionState.NO_SESSION)
        return await self._insert(ctx, member or Member())

    async def update(
        self,
        ctx: RequestContext,
        record: SessionRecord,
        member: Member | None = None,
    ) -> SessionOutcome:
        """Refresh an existing row with this request's details."""
        if ctx.is_ajax:
            return SessionOutcome(state_for(record), record)
        return await self._update(ctx, record, member)

    async def destroy(self, ctx: RequestContext, redirect: bool = False) -> SessionOutcome:
        """Drop the client session, the auth cookie and the persisted row."""
        session_id = ctx.session.id
        ctx.session.destroy()
        await self._delete_row(session_id, "destroy")
        logger.info("Session {} destroyed", session_id)

        return SessionOutcome(
            SessionState.DESTROYED,
            redirect=self._policy.redirect_to if redirect else None,
            expired_cookies=(self._policy.auth_cookie,),
            cookie_options=self._policy.cookie_options,
        )

    async def sign_in(self, ctx: RequestContext, member_id: int) -> SessionOutcome:
        """Promote the current session to a signed-in member."""
        if not self._members.exists(member_id):
            raise NotFoundError(f"Member {member_id} not found", {"member_id": member_id})

        member = self._members.get_by_id(member_id)
        member.signed_in = True
        record = self._sessions.get_by_id(ctx.session.id)

        if record is None:
            return await self._insert(ctx, member)
        return await self._update(ctx, record, member)

    async def sign_out(self, ctx: RequestContext) -> SessionOutcome:
        return await self.destroy(ctx)

    async def collect_garbage(self) -> int:
        """Delete sessions whose expiry has passed. Returns rows deleted."""
        now = self._clock()
        expired = [r.id for r in self._sessions.get_expired(now)]
        if not expired:
            return 0

        statement = self._builder_factory().delete_from(Target.SESSIONS).only_where().in_("id", expired).build()
        if not await self._write(statement, "garbage collection"):
            return 0

        await self._refresh()
        logger.debug("Garbage collected {} expired sessions", len(expired))
        return len(expired)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _stamp(self, record: SessionRecord, ctx: RequestContext, now: int, member: Member | None) -> None:
        record.last_click = now
        record.location = ctx.path
        record.user_agent = ctx.user_agent
        record.hostname = ctx.hostname
        record.ip_address = ctx.ip_address

        if member is not None:
            record.member_id = member.id
            record.is_admin = member.is_admin
            record.display_on_whos_online = member.display_on_whos_online

        bot = self._bots.detect(ctx.user_agent)
        record.is_bot = bot.is_bot
        record.bot_name = bot.name

    async def _insert(self, ctx: RequestContext, member: Member) -> SessionOutcome:
        now = self._clock()
        record = SessionRecord(id=ctx.session.id, expires=now + self._policy.duration_seconds)
        self._stamp(record, ctx, now, member)

        row = record.to_row()
        statement = self._builder_factory().insert_into(Target.SESSIONS, SESSION_COLUMNS, list(row.values())).build()
        if await self._write(statement, "create"):
            await self._refresh()
            logger.debug("Session {} created (member={})", record.id, record.member_id)

        return SessionOutcome(state_for(record), record)

    async def _update(self, ctx: RequestContext, record: SessionRecord, member: Member | None) -> SessionOutcome:
        self._stamp(record, ctx, self._clock(), member)

        row = record.to_row()
        statement = (
            self._builder_factory()
            .update(Target.SESSIONS)
            .set(_UPDATE_COLUMNS, [row[c] for c in _UPDATE_COLUMNS])
            .where("id = ?", [record.id])
            .build()
        )
        if await self._write(statement, "update"):
            await self._refresh()

        return SessionOutcome(state_for(record), record)

    async def _delete_row(self, session_id: str, reason: str) -> None:
        statement = self._builder_factory().delete_from(Target.SESSIONS).where("id = ?", [session_id]).build()
        if await self._write(statement, reason):
            await self._refresh()

    async def _write(self, statement: Statement, action: str) -> bool:
        try:
            await self._db.query(statement)
        except DatabaseError as e:
            logger.error("Session {} failed: {}", action, e)
            return False
        return True

    async def _refresh(self) -> None:
        try:
            await self._cache.update(Target.SESSIONS)
        except DatabaseError as e:
            logger.error("Failed to refresh sessions cache: {}", e)
