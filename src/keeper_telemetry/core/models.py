"""Core domain models for keeper telemetry."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChainIdLabel:
    """Label set identifying a per-chain gauge series.

    Attributes:
        chain_id: Opaque network name (e.g., "ethereum", "blast").
    """

    chain_id: str

    def as_dict(self) -> dict[str, str]:
        """Return the label set as exposition key-value pairs."""
        return {"chain_id": self.chain_id}


@dataclass(frozen=True)
class AccountLabel:
    """Label set identifying a per-account gauge series.

    Two labels are equal only when both fields match exactly, so the
    same address on two chains (or two addresses on one chain) always
    maps to distinct series.

    Attributes:
        chain_id: Opaque network name.
        address: Canonical string form of the account address.
    """

    chain_id: str
    address: str

    def as_dict(self) -> dict[str, str]:
        """Return the label set as exposition key-value pairs."""
        return {"chain_id": self.chain_id, "address": self.address}


@dataclass(frozen=True)
class Block:
    """The part of a block header the lag sampler needs.

    Attributes:
        timestamp: Block timestamp in unix seconds.
    """

    timestamp: int


@dataclass(frozen=True)
class ProviderInfoSnapshot:
    """Point-in-time read of a provider's on-chain fee and sequence state.

    Fee amounts are in the chain's smallest unit (wei).

    Attributes:
        accrued_fees_in_wei: Fees collected by the provider so far.
        fee_in_wei: Fee currently charged per request.
        sequence_number: Next sequence number to be assigned (u64).
        end_sequence_number: Last usable sequence number of the hash chain (u64).
        current_commitment_sequence_number: Sequence number of the latest
            revealed commitment (u64).
    """

    accrued_fees_in_wei: int
    fee_in_wei: int
    sequence_number: int
    end_sequence_number: int
    current_commitment_sequence_number: int


@dataclass(frozen=True)
class MetricSample:
    """A single gauge series as seen at scrape time.

    Attributes:
        name: Metric family name (e.g., block_timestamp_lag).
        timestamp: Unix timestamp of the last write, in seconds.
        value: The current gauge value.
        labels: Key-value pairs for metric dimensions.
    """

    name: str
    timestamp: float
    value: float
    labels: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Log level (e.g., INFO, ERROR, DEBUG).
        message: The log message.
        attributes: Additional structured fields.
    """

    timestamp: float
    level: str
    message: str
    attributes: dict[str, str | int | float | bool] = field(default_factory=dict)
