"""Dependency container - built once at startup."""

from loguru import logger

from board.data.cache import CacheProvider, create_cache_provider
from board.data.db import DatabaseProvider, create_database_provider
from board.data.seed import seed_defaults
from board.repositories import DeviceRepository, MemberRepository, SessionRepository
from board.services.board_settings import BoardSettings
from board.services.registry import Registry
from board.services.session import SessionLifecycle, SessionPolicy


class Container:
    """Holds the wired providers, repositories and services.

    Instances are passed explicitly; nothing here is a process-wide singleton.
    """

    def __init__(self, db: DatabaseProvider | None = None, cache: CacheProvider | None = None):
        self.db = db or create_database_provider()
        self.cache = cache or create_cache_provider(self.db)
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def init(self, seed: bool = True) -> None:
        """Connect, create tables, build the cache and wire services.

        Any failure propagates; the caller must not serve traffic.
        """
        if self._initialized:
            return

        await self.db.connect()
        await self.db.init_tables()
        await self.cache.build()

        if seed:
            await seed_defaults(self.db, self.cache)

        # Repositories (cache readers)
        self.sessions = SessionRepository(self.cache)
        self.members = MemberRepository(self.cache)
        self.devices = DeviceRepository(self.cache)

        # Services
        self.settings = BoardSettings(self.cache)
        self.settings.reload()
        self.registry = Registry(self.cache, self.db)
        self.session_lifecycle = SessionLifecycle(
            self.cache,
            self.db,
            policy=SessionPolicy.from_settings(self.settings),
        )

        self._initialized = True
        logger.info("Board core initialized")

    async def close(self) -> None:
        if self.db.is_connected:
            await self.db.disconnect()
        self._initialized = False
