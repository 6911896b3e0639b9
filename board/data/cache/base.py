"""Cache provider contract."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from board.data.targets import Target


class CacheProvider(ABC):
    """Holds the full row set of every target in memory."""

    @property
    @abstractmethod
    def targets(self) -> tuple[Target, ...]:
        """Enumerated targets this provider serves."""

    @property
    @abstractmethod
    def is_built(self) -> bool:
        """True once build() has completed."""

    @abstractmethod
    async def build(self) -> None:
        """Populate every target. Raises if any target fails."""

    @abstractmethod
    async def update(self, target: Target | str) -> None:
        """Replace the cached rows of one target with a fresh full read."""

    @abstractmethod
    async def update_all(self, targets: Iterable[Target | str]) -> None:
        """Refresh several targets."""

    @abstractmethod
    def get(self, target: Target | str) -> list[dict]:
        """Rows of a target; empty list if never populated."""

    @abstractmethod
    def get_all(self, target_map: Mapping[str, Target | str]) -> dict[str, list[dict]]:
        """Resolve {alias: target} to {alias: rows} from one cache generation."""
