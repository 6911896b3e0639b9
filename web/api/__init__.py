"""Thin read-only views over the board core."""
