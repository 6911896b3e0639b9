"""Bulletin-board data-access and session core."""

__version__ = "0.1.0"
