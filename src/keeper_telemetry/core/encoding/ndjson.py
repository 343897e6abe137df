"""NDJSON rendering of captured keeper log records for the /logs endpoint."""

import dataclasses
import json
from collections.abc import AsyncIterable

from keeper_telemetry.core.models import LogEntry


def _entry_line(entry: LogEntry) -> str:
    # non-JSON attribute values, such as address objects, render via str()
    return json.dumps(dataclasses.asdict(entry), default=str) + "\n"


async def encode_logs(entries: AsyncIterable[LogEntry]) -> str:
    """Render log entries as newline-delimited JSON.

    Each line holds timestamp, level, message and attributes, where the
    attributes carry the structured fields of the record such as chain_id,
    address and failure. No entries render as the empty string.
    """
    return "".join([_entry_line(entry) async for entry in entries])
