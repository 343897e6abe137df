"""Unit conversion and sample helpers for keeper gauges."""

import time

from keeper_telemetry.core.models import MetricSample

# Every tracked chain is assumed to use an 18-decimal native asset, so one
# native unit is 1e18 of the smallest on-chain unit (wei).
WEI_PER_NATIVE_UNIT = 1e18

_INT64_RANGE = 1 << 64
_INT64_MAX = (1 << 63) - 1


def wei_to_native(amount: int) -> float:
    """Convert an amount in wei to native units as a float.

    Precision is bounded by float64; very large amounts round.

    Args:
        amount: Unsigned amount in the smallest on-chain unit.

    Returns:
        amount / 1e18 with standard float division semantics.
    """
    return amount / WEI_PER_NATIVE_UNIT


def as_int64(value: int) -> int:
    """Project an unsigned 64-bit counter onto the signed 64-bit gauge range.

    Values above the int64 maximum wrap the way a two's complement cast
    does. Sequence numbers stay far below that bound in practice.
    """
    value %= _INT64_RANGE
    if value > _INT64_MAX:
        return value - _INT64_RANGE
    return value


def gauge(
    name: str,
    value: float,
    labels: dict[str, str] | None = None,
    timestamp: float | None = None,
) -> MetricSample:
    """Create a gauge metric sample.

    Args:
        name: Metric name (e.g., "balance")
        value: Current gauge value
        labels: Optional dimension labels
        timestamp: Time of the write (default: now)

    Returns:
        MetricSample with the given or current timestamp
    """
    return MetricSample(
        name=name,
        timestamp=time.time() if timestamp is None else timestamp,
        value=value,
        labels=labels or {},
    )
