"""Shared test fixtures for all test modules."""

import logging
from collections.abc import Iterator

import pytest

from keeper_telemetry.adapters.logging import KeeperLogHandler
from keeper_telemetry.adapters.sink import KeeperMetrics
from keeper_telemetry.adapters.storage import RingBufferLogStorage
from tests.helpers import FakeChainClient, FakeContractClient

try:
    import httpx
except ImportError:
    httpx = None


@pytest.fixture
def metrics() -> KeeperMetrics:
    """Fixture providing an empty metrics sink."""
    return KeeperMetrics()


@pytest.fixture
def chain_client() -> FakeChainClient:
    """Fixture providing a healthy fake chain client."""
    return FakeChainClient()


@pytest.fixture
def contract_client() -> FakeContractClient:
    """Fixture providing a healthy fake contract client."""
    return FakeContractClient()


@pytest.fixture
def frozen_time(monkeypatch: pytest.MonkeyPatch):
    """Factory fixture pinning time.time() to a fixed value."""
    import time

    def _freeze(now: float) -> None:
        monkeypatch.setattr(time, "time", lambda: now)

    return _freeze


@pytest.fixture
def log_storage() -> RingBufferLogStorage:
    """Fixture providing an empty log storage."""
    return RingBufferLogStorage(max_size=100)


@pytest.fixture
def captured_logs(log_storage: RingBufferLogStorage) -> Iterator[RingBufferLogStorage]:
    """Attach a KeeperLogHandler to the package logger for one test."""
    handler = KeeperLogHandler(log_storage)
    logger = logging.getLogger("keeper_telemetry")
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield log_storage
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            app = create_asgi_app(metrics)
            async with asgi_test_client(app) as client:
                response = await client.get("/metrics")
    """
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
