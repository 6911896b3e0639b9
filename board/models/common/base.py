"""Base entity class for all row-backed entities."""

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]


def render_ddl(ddl: str, prefix: str = "") -> str:
    """Apply the table prefix to a DDL template."""
    return ddl.format(prefix=prefix)
