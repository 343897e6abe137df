"""Encoders for scrape endpoints."""

from keeper_telemetry.core.encoding.ndjson import encode_logs
from keeper_telemetry.core.encoding.prometheus import CONTENT_TYPE, encode_samples

__all__ = ["CONTENT_TYPE", "encode_logs", "encode_samples"]
