"""Repositories package - cache-backed lookups."""

from board.repositories.base import BaseRepository
from board.repositories.member import DeviceRepository, MemberRepository, build_member
from board.repositories.session import SessionRepository

__all__ = [
    "BaseRepository",
    "SessionRepository",
    "MemberRepository",
    "DeviceRepository",
    "build_member",
]
