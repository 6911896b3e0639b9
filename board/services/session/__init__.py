"""Session lifecycle."""

from board.services.session.context import (
    ClientSession,
    RequestContext,
    SessionOutcome,
    SessionState,
    new_session_id,
)
from board.services.session.lifecycle import SessionLifecycle
from board.services.session.policy import BotDetector, BotMatch, SessionPolicy, compile_bots

__all__ = [
    "SessionLifecycle",
    "SessionPolicy",
    "BotDetector",
    "BotMatch",
    "compile_bots",
    "ClientSession",
    "RequestContext",
    "SessionOutcome",
    "SessionState",
    "new_session_id",
]
