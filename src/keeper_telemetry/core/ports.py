"""Port interfaces for the collaborators samplers depend on.

The samplers depend only on these protocols. Chain RPC clients and contract
bindings live outside this package; the metrics sink and log storage have
in-memory adapters under keeper_telemetry.adapters.
"""

from collections.abc import AsyncIterable, Hashable
from typing import Protocol, runtime_checkable

from keeper_telemetry.core.models import Block, LogEntry, ProviderInfoSnapshot


@runtime_checkable
class ChainClientPort(Protocol):
    """Port for native chain reads.

    Implementations raise TransportError (or any other exception) when the
    underlying RPC request fails.
    """

    async def get_balance(self, address: object) -> int:
        """Return the native balance of address in the smallest unit."""
        ...

    async def get_latest_block(self) -> Block | None:
        """Return the latest block, or None when the node reports none."""
        ...


@runtime_checkable
class ContractClientPort(Protocol):
    """Port for reads against the entropy contract.

    Implementations raise CallError (or any other exception) when the
    contract call fails.
    """

    async def get_provider_info(self, address: object) -> ProviderInfoSnapshot:
        """Return the provider's fee and sequence-number state."""
        ...

    async def get_accrued_fees(self) -> int:
        """Return protocol-wide accrued fees in the smallest unit."""
        ...


@runtime_checkable
class GaugePort(Protocol):
    """A single gauge series."""

    def set(self, value: float) -> None:
        """Replace the series value."""
        ...


@runtime_checkable
class GaugeFamilyPort(Protocol):
    """A named family of gauge series addressed by label."""

    def get_or_create(self, label: Hashable) -> GaugePort:
        """Return the series for label, creating it on first use."""
        ...


@runtime_checkable
class MetricsSinkPort(Protocol):
    """Port for the keeper's published gauge families.

    Adapters must allow concurrent writes from independent samplers.
    Examples: KeeperMetrics.
    """

    balance: GaugeFamilyPort
    block_timestamp_lag: GaugeFamilyPort
    collected_fee: GaugeFamilyPort
    current_fee: GaugeFamilyPort
    current_sequence_number: GaugeFamilyPort
    current_commitment_sequence_number: GaugeFamilyPort
    end_sequence_number: GaugeFamilyPort
    accrued_pyth_fees: GaugeFamilyPort


@runtime_checkable
class LogStoragePort(Protocol):
    """Port for log storage operations.

    Adapters implementing this protocol can store and retrieve log entries.
    Examples: RingBufferLogStorage.
    """

    def write(self, entry: LogEntry) -> None:
        """Write a log entry to storage."""
        ...

    def read(
        self, since: float = 0, level: str | None = None
    ) -> AsyncIterable[LogEntry]:
        """Read log entries since the given timestamp.

        Args:
            since: Unix timestamp. Returns entries with timestamp > since.
                   Default 0 returns all entries.
            level: Optional level filter (case-insensitive).

        Returns:
            Async iterable of LogEntry objects, ordered by timestamp ascending.
        """
        ...
