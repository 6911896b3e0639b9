"""Board settings - typed view over the cached settings target."""

import json
import re
from dataclasses import dataclass
from typing import Any

from loguru import logger

from board.data.cache import CacheProvider
from board.data.targets import Target
from board.errors import ValidationError
from board.models import BaseEntity


@dataclass
class Setting(BaseEntity):
    """One parsed settings row."""

    id: int
    name: str
    type: str | None = None
    value: Any = None
    default_value: Any = None
    description: str | None = None
    category: str | None = None


def _has_text(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


def _json_or_none(value: Any) -> Any:
    if not _has_text(value):
        return None
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ("true", "1", "yes")


def _to_int(value: Any, default: int = -1) -> int:
    try:
        return int(str(value).strip()) if _has_text(value) else default
    except ValueError:
        return default


def _to_float(value: Any, default: float = -1.0) -> float:
    try:
        return float(str(value).strip()) if _has_text(value) else default
    except ValueError:
        return default


def _to_patterns(value: Any) -> list[re.Pattern]:
    items = _json_or_none(value) or []
    if not isinstance(items, list):
        raise ValidationError("regexarray expects a JSON array")
    return [re.compile(str(p)) for p in items]


PARSERS = {
    "serialized": _json_or_none,
    "regexarray": _to_patterns,
    "bool": _to_bool,
    "number": _to_int,
    "float": _to_float,
    "string": lambda v: "" if v is None else str(v),
}


def parse_setting(row: dict) -> Setting:
    """Setting entity from a raw row, converting value by declared type."""
    kind = row.get("type")
    parse = PARSERS.get(kind, lambda v: v)

    try:
        value = parse(row.get("value"))
        default_value = parse(row.get("default_value"))
    except ValidationError:
        logger.error("Error processing setting {}", row.get("name"))
        raise

    return Setting(
        id=row["id"],
        name=row["name"],
        type=kind,
        value=value,
        default_value=default_value,
        description=row.get("description"),
        category=row.get("category"),
    )


class BoardSettings:
    """Settings stored in the database, read through the cache."""

    def __init__(self, cache: CacheProvider):
        self._cache = cache
        self._settings: dict[str, Setting] = {}

    def reload(self) -> None:
        """Re-parse the cached settings rows."""
        settings: dict[str, Setting] = {}
        for row in self._cache.get(Target.SETTINGS):
            if not row.get("name") or row.get("id") is None:
                logger.warning("Skipping invalid setting: {}", row)
                continue
            settings[row["name"]] = parse_setting(row)

        self._settings = settings
        logger.debug("Board settings loaded: {}", len(settings))

    def exists(self, name: str) -> bool:
        if not isinstance(name, str):
            raise ValidationError("Setting key must be a string")
        return name in self._settings

    def get(self, name: str, default: Any = None) -> Any:
        if not self.exists(name):
            return default
        value = self._settings[name].value
        return default if value is None else value

    def all(self) -> dict[str, Setting]:
        return dict(self._settings)
