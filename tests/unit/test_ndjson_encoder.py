"""Tests for NDJSON log encoding."""

import json
from collections.abc import AsyncIterable

import pytest

from keeper_telemetry.core.encoding.ndjson import encode_logs
from keeper_telemetry.core.models import LogEntry


async def _aiter(entries: list[LogEntry]) -> AsyncIterable[LogEntry]:
    for entry in entries:
        yield entry


class TestEncodeLogs:
    """Tests for encode_logs()."""

    @pytest.mark.core
    async def test_empty_input_returns_empty_string(self) -> None:
        assert await encode_logs(_aiter([])) == ""

    @pytest.mark.core
    async def test_single_entry(self) -> None:
        entry = LogEntry(
            timestamp=1000.0,
            level="ERROR",
            message="Block is None",
            attributes={"chain_id": "ethereum"},
        )

        result = await encode_logs(_aiter([entry]))

        assert result.endswith("\n")
        assert json.loads(result) == {
            "timestamp": 1000.0,
            "level": "ERROR",
            "message": "Block is None",
            "attributes": {"chain_id": "ethereum"},
        }

    @pytest.mark.core
    async def test_one_line_per_entry(self) -> None:
        entries = [
            LogEntry(timestamp=1000.0 + i, level="INFO", message=f"msg {i}")
            for i in range(3)
        ]

        result = await encode_logs(_aiter(entries))

        lines = result.strip().split("\n")
        assert [json.loads(line)["message"] for line in lines] == [
            "msg 0",
            "msg 1",
            "msg 2",
        ]

    @pytest.mark.core
    async def test_non_json_attribute_renders_as_string(self) -> None:
        class Address:
            def __str__(self) -> str:
                return "0xabc"

        entry = LogEntry(
            timestamp=1000.0,
            level="ERROR",
            message="Error while getting balance. error: missing_data",
            attributes={"address": Address()},
        )

        result = await encode_logs(_aiter([entry]))

        assert json.loads(result)["attributes"] == {"address": "0xabc"}
