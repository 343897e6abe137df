"""FastAPI adapter for the keeper's scrape endpoints."""

from fastapi import APIRouter, Query, Response

from keeper_telemetry.adapters.sink import KeeperMetrics
from keeper_telemetry.core.encoding.ndjson import encode_logs
from keeper_telemetry.core.encoding.prometheus import CONTENT_TYPE, encode_samples
from keeper_telemetry.core.ports import LogStoragePort


def create_metrics_router(
    metrics: KeeperMetrics,
    log_storage: LogStoragePort | None = None,
) -> APIRouter:
    """Create a FastAPI router with /metrics and, optionally, /logs.

    Args:
        metrics: The keeper's gauge families.
        log_storage: Storage adapter implementing LogStoragePort.

    Returns:
        APIRouter with the endpoints configured.
    """
    router = APIRouter()

    @router.get("/metrics")
    async def get_metrics() -> Response:
        """Return gauges in Prometheus text format."""
        body = encode_samples(await metrics.scrape(), metrics.descriptions())
        return Response(content=body, media_type=CONTENT_TYPE)

    if log_storage is not None:

        @router.get("/logs")
        async def get_logs(
            since: float = Query(default=0, ge=0),
            level: str | None = Query(default=None),
        ) -> Response:
            """Return captured logs in NDJSON format.

            Args:
                since: Unix timestamp. Returns entries with timestamp > since.
                level: Only return entries of this level.
            """
            body = await encode_logs(log_storage.read(since=since, level=level))
            return Response(content=body, media_type="application/x-ndjson")

    return router
