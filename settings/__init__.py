"""Application settings."""

import os
from pathlib import Path


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# Database
DB_PROVIDER = os.getenv("BOARD_DB_PROVIDER", "duckdb")
DUCKDB_PATH = os.getenv("BOARD_DUCKDB_PATH", "board.duckdb")
DUCKDB_TABLE_PREFIX = os.getenv("BOARD_DUCKDB_TABLE_PREFIX", "")
SQLITE_PATH = os.getenv("BOARD_SQLITE_PATH", "board.db")
SQLITE_TABLE_PREFIX = os.getenv("BOARD_SQLITE_TABLE_PREFIX", "")

# Cache
CACHE_ENABLED = _flag("BOARD_CACHE_ENABLED", "true")
CACHE_METHOD = os.getenv("BOARD_CACHE_METHOD", "memory")

# Sessions
SESSION_DURATION_MINUTES = int(os.getenv("BOARD_SESSION_DURATION_MINUTES", "60"))
SESSION_VALIDATE_CONTINUITY = _flag("BOARD_SESSION_VALIDATE_CONTINUITY", "true")

# Cookies
AUTH_TOKEN_COOKIE = os.getenv("BOARD_AUTH_TOKEN_COOKIE", "BOARD_MEMBER_AUTH_TOKEN")
COOKIE_SECURE = _flag("BOARD_COOKIE_SECURE", "false")
COOKIE_HTTP_ONLY = _flag("BOARD_COOKIE_HTTP_ONLY", "true")
COOKIE_SAME_SITE = os.getenv("BOARD_COOKIE_SAME_SITE", "lax")

# Logging
LOG_DIR = Path(os.getenv("BOARD_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("BOARD_LOG_LEVEL", "INFO")
