"""Sessions API."""

from web.api.sessions.views import get_whos_online

__all__ = ["get_whos_online"]
