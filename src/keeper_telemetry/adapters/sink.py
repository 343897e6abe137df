"""In-memory metrics sink holding the keeper's gauge families.

KeeperMetrics implements MetricsSinkPort. Every family keeps one series per
label and every series holds only its most recent value. Locks make writes
safe from concurrent tasks and from threads.
"""

import threading
import time
from collections.abc import Hashable, Iterator

from keeper_telemetry.core.metrics import gauge
from keeper_telemetry.core.models import MetricSample


class GaugeSeries:
    """One labeled gauge series with last-write-wins semantics.

    A series has no value until the first set() and is not scraped before it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: float | None = None
        self._updated_at = 0.0

    def set(self, value: float) -> None:
        """Replace the series value."""
        with self._lock:
            self._value = value
            self._updated_at = time.time()

    def get(self) -> float | None:
        """Return the current value, or None if never set."""
        with self._lock:
            return self._value

    def snapshot(self) -> tuple[float | None, float]:
        """Return (value, time of last write) as one consistent pair."""
        with self._lock:
            return self._value, self._updated_at


class GaugeFamily:
    """A named gauge family whose series are keyed by a label object.

    Args:
        name: Metric name exposed to scrapers.
        description: Help text exposed to scrapers.
    """

    def __init__(self, name: str, description: str = "") -> None:
        self.name = name
        self.description = description
        self._lock = threading.Lock()
        self._series: dict[Hashable, GaugeSeries] = {}

    def get_or_create(self, label: Hashable) -> GaugeSeries:
        """Return the series for label, creating it on first use."""
        with self._lock:
            series = self._series.get(label)
            if series is None:
                series = GaugeSeries()
                self._series[label] = series
            return series

    def get(self, label: Hashable) -> GaugeSeries | None:
        """Return the series for label without creating it."""
        with self._lock:
            return self._series.get(label)

    def labels(self) -> list[Hashable]:
        """Return every label that has a series."""
        with self._lock:
            return list(self._series)

    def __len__(self) -> int:
        with self._lock:
            return len(self._series)

    def samples(self) -> Iterator[MetricSample]:
        """Yield one sample per series that has been set."""
        with self._lock:
            items = list(self._series.items())
        for label, series in items:
            value, updated_at = series.snapshot()
            if value is None:
                continue
            yield gauge(
                self.name,
                value,
                labels=_label_pairs(label),
                timestamp=updated_at,
            )


def _label_pairs(label: Hashable) -> dict[str, str]:
    as_dict = getattr(label, "as_dict", None)
    if callable(as_dict):
        return dict(as_dict())
    return {"label": str(label)}


class KeeperMetrics:
    """The keeper's gauge families.

    Per-account families are keyed by AccountLabel; per-chain families by
    ChainIdLabel.
    """

    def __init__(self) -> None:
        self.balance = GaugeFamily(
            "balance", "Balance of the keeper in native units"
        )
        self.block_timestamp_lag = GaugeFamily(
            "block_timestamp_lag",
            "Server time minus the latest block timestamp, in seconds",
        )
        self.collected_fee = GaugeFamily(
            "collected_fee", "Fees collected by the provider in native units"
        )
        self.current_fee = GaugeFamily(
            "current_fee", "Current fee charged by the provider in native units"
        )
        self.current_sequence_number = GaugeFamily(
            "current_sequence_number", "Next sequence number of the provider"
        )
        self.current_commitment_sequence_number = GaugeFamily(
            "current_commitment_sequence_number",
            "Sequence number of the provider's latest commitment",
        )
        self.end_sequence_number = GaugeFamily(
            "end_sequence_number", "Last usable sequence number of the provider"
        )
        self.accrued_pyth_fees = GaugeFamily(
            "accrued_pyth_fees", "Protocol fees accrued on the chain in native units"
        )

    def families(self) -> list[GaugeFamily]:
        """Return all families in exposition order."""
        return [
            self.balance,
            self.block_timestamp_lag,
            self.collected_fee,
            self.current_fee,
            self.current_sequence_number,
            self.current_commitment_sequence_number,
            self.end_sequence_number,
            self.accrued_pyth_fees,
        ]

    def descriptions(self) -> dict[str, str]:
        """Return help text keyed by metric name."""
        return {family.name: family.description for family in self.families()}

    async def scrape(self) -> list[MetricSample]:
        """Scrape all current gauge samples."""
        return [sample for family in self.families() for sample in family.samples()]
