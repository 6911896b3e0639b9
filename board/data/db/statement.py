"""SQL statement builder.

Accumulates clause fragments and a parallel list of positional parameters.
Every method appends its placeholders and pushes the matching values in the
same call, so the text and the parameters always line up when the store binds
``?`` placeholders left to right.

    stmt = (
        StatementBuilder()
        .select()
        .from_("sessions")
        .where("member_id = ?", [member_id])
        .and_where("expires > ?", now)
        .build()
    )
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import settings
from board.errors import ConfigurationError, ValidationError

# Store identifier -> settings attribute holding its table prefix
TABLE_PREFIXES = {
    "duckdb": "DUCKDB_TABLE_PREFIX",
    "sqlite": "SQLITE_TABLE_PREFIX",
}


def resolve_table_prefix(provider: str | None = None) -> str:
    """Table prefix for the given (or configured) store identifier."""
    name = (provider or settings.DB_PROVIDER or "").lower()
    if name not in TABLE_PREFIXES:
        raise ConfigurationError(f"Unsupported database type: {provider or settings.DB_PROVIDER}", {"provider": name})
    return getattr(settings, TABLE_PREFIXES[name]) or ""


def _columns(columns: str | Sequence[str]) -> str:
    if isinstance(columns, str):
        return columns
    return ", ".join(columns)


def _is_list(values: Any) -> bool:
    return isinstance(values, (list, tuple))


@dataclass(frozen=True)
class Statement:
    """Built SQL text and its positional parameters."""

    text: str
    parameters: tuple = ()

    @property
    def is_read(self) -> bool:
        head = self.text.lstrip().split(None, 1)
        return bool(head) and head[0].upper() in ("SELECT", "WITH")


class StatementBuilder:
    """Fluent, reusable SQL builder. Not safe to share between concurrent builds."""

    def __init__(self, provider: str | None = None, prefix: str | None = None):
        resolved = resolve_table_prefix(provider)
        self._prefix = resolved if prefix is None else prefix
        self._text = ""
        self._parameters: list[Any] = []

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def text(self) -> str:
        return self._text

    @property
    def parameters(self) -> list[Any]:
        return list(self._parameters)

    def table(self, target: str) -> str:
        """Prefixed table name."""
        return f"{self._prefix}{target}"

    def _append(self, fragment: str, *values: Any) -> "StatementBuilder":
        self._text += f"{fragment} "
        self._parameters.extend(values)
        return self

    # ------------------------------------------------------------------
    # SELECT
    # ------------------------------------------------------------------

    def select(self, columns: str | Sequence[str] = "*") -> "StatementBuilder":
        return self._append(f"SELECT {_columns(columns)}")

    def distinct(self) -> "StatementBuilder":
        if "SELECT " not in self._text:
            raise ValidationError("distinct() requires a preceding select()")
        self._text = self._text.replace("SELECT ", "SELECT DISTINCT ", 1)
        return self

    def from_(self, target: str) -> "StatementBuilder":
        return self._append(f"FROM {self.table(target)}")

    def join(self, kind: str, target: str, condition: str) -> "StatementBuilder":
        """Add ``<kind> JOIN`` (INNER, LEFT, RIGHT, FULL)."""
        return self._append(f"{kind.upper()} JOIN {self.table(target)} ON {condition}")

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def where(self, condition: str, values: Any = None) -> "StatementBuilder":
        """Add the WHERE clause. Call once; chain the rest with and_where/or_where."""
        if values is None:
            return self._append(f"WHERE {condition}")
        if _is_list(values):
            return self._append(f"WHERE {condition}", *values)
        return self._append(f"WHERE {condition}", values)

    def and_where(self, condition: str, value: Any) -> "StatementBuilder":
        return self._append(f"AND {condition}", value)

    def or_where(self, condition: str, value: Any) -> "StatementBuilder":
        return self._append(f"OR {condition}", value)

    def only_where(self) -> "StatementBuilder":
        """Bare WHERE keyword, for predicates built with in_/between."""
        return self._append("WHERE")

    def in_(self, column: str, values: Sequence[Any]) -> "StatementBuilder":
        if not _is_list(values) or not values:
            raise ValidationError('The "values" parameter must be a non-empty list', {"column": column})
        placeholders = ", ".join("?" for _ in values)
        return self._append(f"{column} IN ({placeholders})", *values)

    def between(self, column: str, values: Sequence[Any]) -> "StatementBuilder":
        if not _is_list(values) or len(values) != 2:
            raise ValidationError('The "values" parameter for BETWEEN must have exactly two elements', {"column": column})
        low, high = values
        return self._append(f"{column} BETWEEN ? AND ?", low, high)

    # ------------------------------------------------------------------
    # Grouping, ordering, paging
    # ------------------------------------------------------------------

    def group_by(self, columns: str | Sequence[str]) -> "StatementBuilder":
        return self._append(f"GROUP BY {_columns(columns)}")

    def having(self, condition: str, value: Any) -> "StatementBuilder":
        return self._append(f"HAVING {condition}", value)

    def order_by(self, columns: str | Sequence[str], direction: str = "ASC") -> "StatementBuilder":
        direction = direction.upper()
        if direction not in ("ASC", "DESC"):
            raise ValidationError(f"Invalid sort direction: {direction}", {"direction": direction})
        return self._append(f"ORDER BY {_columns(columns)} {direction}")

    def limit(self, count: int) -> "StatementBuilder":
        return self._append("LIMIT ?", count)

    def offset(self, count: int) -> "StatementBuilder":
        return self._append("OFFSET ?", count)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert_into(self, target: str, columns: Sequence[str], values: Sequence[Any]) -> "StatementBuilder":
        if not _is_list(values) or not values:
            raise ValidationError('The "values" parameter must be a non-empty list', {"target": target})
        if len(columns) != len(values):
            raise ValidationError("Columns and values must have the same length", {"target": target})
        placeholders = ", ".join("?" for _ in values)
        return self._append(
            f"INSERT INTO {self.table(target)} ({_columns(columns)}) VALUES ({placeholders})",
            *values,
        )

    def update(self, target: str) -> "StatementBuilder":
        return self._append(f"UPDATE {self.table(target)} SET")

    def set(self, columns: Sequence[str], values: Sequence[Any]) -> "StatementBuilder":
        if len(columns) != len(values):
            raise ValidationError("Columns and values must have the same length", {"columns": list(columns)})
        assignments = ", ".join(f"{column} = ?" for column in columns)
        return self._append(assignments, *values)

    def delete_from(self, target: str) -> "StatementBuilder":
        return self._append(f"DELETE FROM {self.table(target)}")

    def on_duplicate_key_update(self, columns: list[str]) -> "StatementBuilder":
        """MySQL-style upsert tail: ``ON DUPLICATE KEY UPDATE a = VALUES(a), ...``."""
        if not isinstance(columns, list):
            raise ValidationError("on_duplicate_key_update() expects a list of columns")
        assignments = ", ".join(f"{column} = VALUES({column})" for column in columns)
        return self._append(f"ON DUPLICATE KEY UPDATE {assignments}")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def build(self) -> Statement:
        return Statement(text=self._text.strip(), parameters=tuple(self._parameters))

    def clear(self) -> "StatementBuilder":
        self._text = ""
        self._parameters = []
        return self
