"""Board errors."""

from typing import Any


class BoardError(Exception):
    """Base error for the board core."""

    def __init__(self, message: str = "Board error", data: dict[str, Any] | None = None):
        self.message = message
        self.data = data or {}
        super().__init__(self.message)


class ConfigurationError(BoardError):
    """Unsupported or missing configuration (store identifier, cache method)."""

    def __init__(self, message: str = "Unsupported configuration", data: dict[str, Any] | None = None):
        super().__init__(message, data)


class NotFoundError(BoardError):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found", data: dict[str, Any] | None = None):
        super().__init__(message, data)


class ValidationError(BoardError):
    """Malformed arguments passed by a caller."""

    def __init__(self, message: str = "Validation error", data: dict[str, Any] | None = None):
        super().__init__(message, data)


class DatabaseError(BoardError):
    """Statement execution failed in the backing store."""

    def __init__(self, message: str = "Database error", data: dict[str, Any] | None = None):
        super().__init__(message, data)


class CacheBuildError(BoardError):
    """Initial cache build failed; the process must not serve traffic."""

    def __init__(self, message: str = "Cache build failed", data: dict[str, Any] | None = None):
        super().__init__(message, data)
