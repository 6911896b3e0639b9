"""Common models - base entity and system tables."""

from board.models.common.base import BaseEntity, render_ddl
from board.models.common.system import (
    FEATURES_DDL,
    LOCALES_DDL,
    REGISTRY_DDL,
    SETTINGS_DDL,
    THEMES_DDL,
    WIDGETS_DDL,
)

__all__ = [
    "BaseEntity",
    "render_ddl",
    "SETTINGS_DDL",
    "REGISTRY_DDL",
    "LOCALES_DDL",
    "THEMES_DDL",
    "FEATURES_DDL",
    "WIDGETS_DDL",
]
