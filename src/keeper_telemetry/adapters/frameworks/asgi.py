"""ASGI generic adapter for the keeper's scrape endpoints.

This adapter provides a framework-agnostic ASGI application that can be used
with any ASGI server (uvicorn, hypercorn, daphne) without requiring FastAPI.
"""

import json
import logging
from collections.abc import Callable, Coroutine
from typing import Any
from urllib.parse import parse_qs

from keeper_telemetry.adapters.frameworks.query_params import (
    _parse_level_param,
    _parse_since_param,
)
from keeper_telemetry.adapters.sink import KeeperMetrics
from keeper_telemetry.core.encoding.ndjson import encode_logs
from keeper_telemetry.core.encoding.prometheus import CONTENT_TYPE, encode_samples
from keeper_telemetry.core.ports import LogStoragePort

logger = logging.getLogger(__name__)

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]


def _parse_query_params(scope: Scope) -> dict[str, list[str]]:
    """Parse query string from ASGI scope into parameter dictionary.

    Returns an empty dict if query_string is missing or empty.
    """
    query_string = scope.get("query_string", b"").decode(errors="replace")
    return parse_qs(query_string)


async def _send_response(send: Send, status: int, content_type: str, body: str) -> None:
    """Send an HTTP response with headers and body."""
    headers = [(b"content-type", content_type.encode())]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body.encode()})


async def _handle_endpoint(
    send: Send,
    endpoint_func: Callable[[], Coroutine[Any, Any, str]],
    content_type: str,
    log_message: str,
) -> None:
    """Execute an endpoint function with error handling and send response.

    Args:
        send: ASGI send callable for writing response.
        endpoint_func: Async function that returns response body.
        content_type: Content-Type header for success response.
        log_message: Message to log on error.
    """
    try:
        body = await endpoint_func()
    except Exception:
        logger.exception(log_message)
        error_body = json.dumps({"error": "Internal Server Error"})
        await _send_response(send, 500, "application/json", error_body)
        return
    await _send_response(send, 200, content_type, body)


def create_asgi_app(
    metrics: KeeperMetrics,
    log_storage: LogStoragePort | None = None,
) -> ASGIApp:
    """Create an ASGI app with /metrics and /logs endpoints.

    Args:
        metrics: The keeper's gauge families.
        log_storage: Storage adapter implementing LogStoragePort. When
            omitted, /logs answers 404.

    Returns:
        ASGI application callable.
    """

    async def render_metrics() -> str:
        return encode_samples(await metrics.scrape(), metrics.descriptions())

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        path = scope["path"]

        if path == "/metrics":
            await _handle_endpoint(
                send,
                render_metrics,
                CONTENT_TYPE,
                "Error encoding metrics endpoint",
            )
        elif path == "/logs" and log_storage is not None:
            params = _parse_query_params(scope)
            since = _parse_since_param(params)
            level = _parse_level_param(params)
            await _handle_endpoint(
                send,
                lambda: encode_logs(log_storage.read(since=since, level=level)),
                "application/x-ndjson",
                "Error encoding logs endpoint",
            )
        else:
            await _send_response(send, 404, "text/plain", "Not Found")

    return app
