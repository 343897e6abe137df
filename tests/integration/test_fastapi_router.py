"""Integration tests for the FastAPI scrape router."""

import json

import pytest

fastapi = pytest.importorskip("fastapi")

from keeper_telemetry.adapters.frameworks.fastapi import create_metrics_router  # noqa: E402
from keeper_telemetry.adapters.sink import KeeperMetrics  # noqa: E402
from keeper_telemetry.adapters.storage import RingBufferLogStorage  # noqa: E402
from keeper_telemetry.core.models import ChainIdLabel, LogEntry  # noqa: E402


def _app(metrics: KeeperMetrics, log_storage: RingBufferLogStorage | None = None):
    app = fastapi.FastAPI()
    app.include_router(create_metrics_router(metrics, log_storage))
    return app


class TestFastAPIRouter:
    """Tests for create_metrics_router()."""

    @pytest.mark.tier(2)
    @pytest.mark.asgi
    async def test_metrics_route(self, metrics: KeeperMetrics, asgi_test_client) -> None:
        metrics.accrued_pyth_fees.get_or_create(ChainIdLabel("ethereum")).set(0.25)

        async with asgi_test_client(_app(metrics)) as client:
            response = await client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'accrued_pyth_fees{chain_id="ethereum"} 0.25' in response.text
        assert "# HELP accrued_pyth_fees" in response.text

    @pytest.mark.tier(2)
    @pytest.mark.asgi
    async def test_logs_route(self, metrics: KeeperMetrics, asgi_test_client) -> None:
        storage = RingBufferLogStorage()
        storage.write(LogEntry(timestamp=1000.0, level="ERROR", message="failed"))

        async with asgi_test_client(_app(metrics, storage)) as client:
            response = await client.get("/logs", params={"since": 0})

        assert response.status_code == 200
        assert json.loads(response.text)["message"] == "failed"

    @pytest.mark.tier(2)
    @pytest.mark.asgi
    async def test_logs_route_absent_without_storage(
        self, metrics: KeeperMetrics, asgi_test_client
    ) -> None:
        async with asgi_test_client(_app(metrics)) as client:
            response = await client.get("/logs")

        assert response.status_code == 404
