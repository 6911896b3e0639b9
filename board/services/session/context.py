"""Request-scoped inputs and outputs of the session lifecycle."""

import secrets
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from board.helpers import normalize_ip
from board.models import SessionRecord


def new_session_id() -> str:
    return secrets.token_urlsafe(24)


class SessionState(StrEnum):
    NO_SESSION = "no_session"
    GUEST = "guest"
    MEMBER = "member"
    DESTROYED = "destroyed"


@dataclass
class ClientSession:
    """Server-side session object addressed by the session cookie."""

    id: str = field(default_factory=new_session_id)
    data: dict = field(default_factory=dict)
    destroyed: bool = False

    def destroy(self) -> None:
        self.data.clear()
        self.destroyed = True


@dataclass
class RequestContext:
    """What the lifecycle needs to know about the inbound request."""

    session: ClientSession
    path: str = "/"
    ip_address: str = ""
    user_agent: str = ""
    hostname: str = ""
    cookies: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.ip_address = normalize_ip(self.ip_address)

    @property
    def is_ajax(self) -> bool:
        """Background polling requests never touch persisted sessions."""
        if "/ajax" in self.path:
            return True
        requested_with = {k.lower(): v for k, v in self.headers.items()}.get("x-requested-with", "")
        return requested_with.lower() == "xmlhttprequest"


@dataclass
class SessionOutcome:
    """Result of one lifecycle run, applied by the HTTP layer."""

    state: SessionState
    record: SessionRecord | None = None
    redirect: str | None = None
    expired_cookies: tuple[str, ...] = ()
    cookie_options: dict = field(default_factory=dict)

    @property
    def member_id(self) -> int | None:
        return self.record.member_id if self.record else None
