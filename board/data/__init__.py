"""Data layer - targets, statement builder, database and cache providers."""

from board.data.targets import Target

__all__ = ["Target"]
