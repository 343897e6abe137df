"""Tests for query parameter parsing helpers."""

import pytest

from keeper_telemetry.adapters.frameworks.query_params import (
    _parse_level_param,
    _parse_since_param,
)


class TestParseSinceParam:
    """Tests for _parse_since_param()."""

    @pytest.mark.asgi
    def test_missing_defaults_to_zero(self) -> None:
        assert _parse_since_param({}) == 0.0

    @pytest.mark.asgi
    def test_valid_timestamp(self) -> None:
        assert _parse_since_param({"since": ["1702300000.5"]}) == 1702300000.5

    @pytest.mark.asgi
    @pytest.mark.parametrize("raw", ["abc", "-1", "nan", "inf", "-inf"])
    def test_invalid_values_default_to_zero(self, raw: str) -> None:
        assert _parse_since_param({"since": [raw]}) == 0.0


class TestParseLevelParam:
    """Tests for _parse_level_param()."""

    @pytest.mark.asgi
    def test_missing_is_none(self) -> None:
        assert _parse_level_param({}) is None

    @pytest.mark.asgi
    def test_level_is_uppercased(self) -> None:
        assert _parse_level_param({"level": ["error"]}) == "ERROR"

    @pytest.mark.asgi
    def test_unknown_level_is_none(self) -> None:
        assert _parse_level_param({"level": ["loud"]}) is None
