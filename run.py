#!/usr/bin/env python3
"""Start the board core: connect, build the cache, report readiness.

Usage:
    python run.py              # configured store (BOARD_DB_PROVIDER)
    python run.py --no-seed    # skip default groups/settings
"""

import asyncio
import sys

from board.container import Container
from board.errors import BoardError
from settings.logging import setup_logging

logger = setup_logging(to_file=True)


async def startup(seed: bool = True) -> None:
    container = Container()
    try:
        await container.init(seed=seed)
        rows = sum(len(container.cache.get(t)) for t in container.cache.targets)
        logger.info("Cache ready: {} targets, {} rows", len(container.cache.targets), rows)
    finally:
        await container.close()


def main() -> int:
    seed = "--no-seed" not in sys.argv[1:]

    try:
        asyncio.run(startup(seed=seed))
    except BoardError as e:
        logger.critical("Startup failed, refusing to serve: {}", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
