"""API errors and validation helpers."""

from board.errors import NotFoundError, ValidationError

# Who's online window bounds (minutes)
MIN_WINDOW = 1
MAX_WINDOW = 24 * 60


def validate_window(minutes: int) -> None:
    """Validate the activity window is in range."""
    if not MIN_WINDOW <= minutes <= MAX_WINDOW:
        raise ValidationError(f"Invalid window: {minutes}. Must be between {MIN_WINDOW} and {MAX_WINDOW} minutes")


__all__ = ["NotFoundError", "ValidationError", "validate_window"]
