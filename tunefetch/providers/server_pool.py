"""Round-robin pool of interchangeable mirror servers."""

from __future__ import annotations

from collections.abc import Sequence

from tunefetch.utils.errors import ConfigurationError
from tunefetch.utils.logging import get_logger

logger = get_logger(__name__)


class ServerPool:
    """An ordered, fixed list of mirror base URLs plus the active index.

    A mirror that fails is not removed or marked unhealthy; rotation simply
    moves on to the next one, wrapping back to the first after the last.
    """

    def __init__(self, servers: Sequence[str], index: int = 0) -> None:
        if not servers:
            raise ConfigurationError("Server pool needs at least one mirror")
        self._servers: tuple[str, ...] = tuple(servers)
        self._index = index % len(self._servers)

    @property
    def servers(self) -> tuple[str, ...]:
        return self._servers

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._servers)

    def active_base(self) -> str:
        """Base URL of the mirror the next request goes to."""
        return self._servers[self._index]

    def rotate(self) -> str:
        """Advance to the next mirror and return its base URL."""
        previous = self._servers[self._index]
        self._index = (self._index + 1) % len(self._servers)
        logger.info("mirror_rotated", previous=previous, active=self._servers[self._index])
        return self._servers[self._index]
