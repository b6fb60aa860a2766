"""Unit tests for ServerPool rotation."""

from __future__ import annotations

import pytest

from tunefetch.providers.server_pool import ServerPool
from tunefetch.utils.errors import ConfigurationError


class TestServerPool:
    @pytest.fixture()
    def pool(self) -> ServerPool:
        return ServerPool(["https://a", "https://b", "https://c"])

    def test_starts_on_first_server(self, pool: ServerPool) -> None:
        assert pool.index == 0
        assert pool.active_base() == "https://a"

    def test_rotate_advances(self, pool: ServerPool) -> None:
        assert pool.rotate() == "https://b"
        assert pool.index == 1

    def test_rotate_wraps(self, pool: ServerPool) -> None:
        for _ in range(3):
            pool.rotate()
        assert pool.index == 0
        assert pool.active_base() == "https://a"

    def test_single_server_pool_rotates_onto_itself(self) -> None:
        pool = ServerPool(["https://only"])
        assert pool.rotate() == "https://only"
        assert pool.index == 0

    def test_empty_pool_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ServerPool([])

    def test_start_index_is_wrapped(self) -> None:
        pool = ServerPool(["https://a", "https://b"], index=3)
        assert pool.index == 1

    def test_servers_are_fixed(self, pool: ServerPool) -> None:
        pool.rotate()
        assert pool.servers == ("https://a", "https://b", "https://c")
        assert len(pool) == 3
