"""Database provider contract."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from loguru import logger

from board.data.db.statement import Statement, resolve_table_prefix
from board.errors import DatabaseError, ValidationError
from board.models import ALL_DDL, render_ddl


@dataclass(frozen=True)
class WriteResult:
    """Acknowledgment for statements that do not return rows."""

    affected_rows: int = 0


class DatabaseProvider(ABC):
    """Owns the single connection to the backing store.

    Driver calls run on a one-worker executor, so statements execute one at a
    time in submission order while the event loop keeps serving other requests.
    """

    name: str = ""

    def __init__(self, path: str, prefix: str | None = None):
        self._path = path
        self._prefix = resolve_table_prefix(self.name) if prefix is None else prefix
        self._conn: Any = None
        self._executor: ThreadPoolExecutor | None = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    async def _run(self, fn: Callable, *args: Any) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, fn, *args)

    async def connect(self) -> None:
        """Open the connection. Failure is fatal for startup."""
        if self._conn is not None:
            return

        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"{self.name}-db")
        try:
            self._conn = await self._run(self._open)
        except Exception as e:
            self._executor.shutdown(wait=False)
            self._executor = None
            logger.error("Failed to connect to {} database {}: {}", self.name, self._path, e)
            raise DatabaseError(f"Failed to connect to the {self.name} database: {e}", {"path": self._path}) from e

        logger.debug("DB connected: {} ({})", self._path, self.name)

    async def query(self, statement: Statement) -> list[dict] | WriteResult:
        """Execute a statement: rows for reads, a WriteResult for everything else."""
        if not isinstance(statement, Statement) or not statement.text:
            raise ValidationError("Invalid SQL statement")
        if self._conn is None:
            raise DatabaseError("No active database connection")

        try:
            if statement.is_read:
                return await self._run(self._fetch, statement)
            return await self._run(self._execute, statement)
        except Exception as e:
            logger.error("Query error: {} | {}", e, statement.text)
            raise DatabaseError(str(e), {"statement": statement.text}) from e

    async def init_tables(self) -> None:
        """Create all tables (idempotent - uses IF NOT EXISTS)."""
        for ddl in ALL_DDL:
            await self._run(self._script, render_ddl(ddl, self._prefix))
        logger.info("DB tables initialized (prefix={!r})", self._prefix)

    async def disconnect(self) -> None:
        if self._conn is None:
            raise DatabaseError("No active connection to close")

        try:
            await self._run(self._close)
        finally:
            self._conn = None
            self._executor.shutdown(wait=True)
            self._executor = None
        logger.debug("DB connection closed: {}", self._path)

    # Driver hooks, always called on the executor thread.

    @abstractmethod
    def _open(self) -> Any: ...

    @abstractmethod
    def _fetch(self, statement: Statement) -> list[dict]: ...

    @abstractmethod
    def _execute(self, statement: Statement) -> WriteResult: ...

    @abstractmethod
    def _script(self, sql: str) -> None: ...

    @abstractmethod
    def _close(self) -> None: ...
