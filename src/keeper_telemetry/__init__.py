"""keeper-telemetry: best-effort on-chain gauges for a keeper service."""

from keeper_telemetry.adapters.logging import KeeperLogHandler
from keeper_telemetry.adapters.sink import GaugeFamily, GaugeSeries, KeeperMetrics
from keeper_telemetry.adapters.storage import RingBufferLogStorage
from keeper_telemetry.config import ChainTarget, TrackerConfig
from keeper_telemetry.core.errors import CallError, ReadError, TransportError
from keeper_telemetry.core.metrics import WEI_PER_NATIVE_UNIT, as_int64, wei_to_native
from keeper_telemetry.core.models import (
    AccountLabel,
    Block,
    ChainIdLabel,
    LogEntry,
    MetricSample,
    ProviderInfoSnapshot,
)
from keeper_telemetry.core.ports import (
    ChainClientPort,
    ContractClientPort,
    LogStoragePort,
    MetricsSinkPort,
)
from keeper_telemetry.core.result import Err, Ok, ReadFailure, read_once
from keeper_telemetry.core.track import (
    INF_LAG,
    track_accrued_pyth_fees,
    track_balance,
    track_block_timestamp_lag,
    track_provider,
)
from keeper_telemetry.runtime import KeeperTracker

__all__ = [
    "INF_LAG",
    "WEI_PER_NATIVE_UNIT",
    "AccountLabel",
    "Block",
    "CallError",
    "ChainClientPort",
    "ChainIdLabel",
    "ChainTarget",
    "ContractClientPort",
    "Err",
    "GaugeFamily",
    "GaugeSeries",
    "KeeperLogHandler",
    "KeeperMetrics",
    "KeeperTracker",
    "LogEntry",
    "LogStoragePort",
    "MetricSample",
    "MetricsSinkPort",
    "Ok",
    "ProviderInfoSnapshot",
    "ReadError",
    "ReadFailure",
    "RingBufferLogStorage",
    "TrackerConfig",
    "TransportError",
    "as_int64",
    "track_accrued_pyth_fees",
    "track_balance",
    "track_block_timestamp_lag",
    "track_provider",
    "wei_to_native",
]
