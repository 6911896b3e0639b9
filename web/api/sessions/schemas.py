"""Session API response schemas."""

from pydantic import BaseModel


class OnlineMemberItem(BaseModel):
    """Signed-in member visible in who's online."""

    member_id: int
    display_name: str
    location: str | None
    last_click: int
    is_admin: bool


class OnlineBotItem(BaseModel):
    """Search bot currently crawling."""

    name: str
    location: str | None
    last_click: int


class WhosOnlineResponse(BaseModel):
    """Who's online response."""

    window_minutes: int
    total: int
    guests: int
    hidden: int
    members: list[OnlineMemberItem]
    bots: list[OnlineBotItem]
