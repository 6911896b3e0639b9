"""Session API views - thin layer over cache-backed repositories."""

from board.container import Container
from board.helpers import epoch_now
from web.api.errors import validate_window

from .schemas import OnlineBotItem, OnlineMemberItem, WhosOnlineResponse


def get_whos_online(container: Container, window_minutes: int = 15, now: int | None = None) -> WhosOnlineResponse:
    """Sessions active within the window, split into members, guests and bots."""
    validate_window(window_minutes)
    now = epoch_now() if now is None else now
    since = now - window_minutes * 60

    active = [s for s in container.sessions.get_active(now) if s.last_click >= since]

    members: list[OnlineMemberItem] = []
    bots: list[OnlineBotItem] = []
    guests = hidden = 0
    seen: set[int] = set()

    for session in active:
        if session.is_bot:
            bots.append(OnlineBotItem(name=session.bot_name or "Bot", location=session.location, last_click=session.last_click))
        elif session.is_guest:
            guests += 1
        elif session.member_id in seen:
            continue
        elif not session.display_on_whos_online:
            seen.add(session.member_id)
            hidden += 1
        else:
            seen.add(session.member_id)
            member = container.members.get_by_id(session.member_id)
            members.append(
                OnlineMemberItem(
                    member_id=session.member_id,
                    display_name=member.display_name,
                    location=session.location,
                    last_click=session.last_click,
                    is_admin=session.is_admin,
                )
            )

    return WhosOnlineResponse(
        window_minutes=window_minutes,
        total=len(members) + len(bots) + guests + hidden,
        guests=guests,
        hidden=hidden,
        members=members,
        bots=bots,
    )
