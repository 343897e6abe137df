"""Configuration for the keeper tracking runtime."""

from dataclasses import dataclass

from keeper_telemetry.core.ports import ChainClientPort, ContractClientPort

DEFAULT_TRACK_INTERVAL = 10.0


@dataclass
class ChainTarget:
    """What to track on one chain.

    Attributes:
        chain_id: Network name used as the chain_id label.
        chain_client: Client bound to the chain's RPC endpoint.
        contract_client: Client bound to the entropy contract, if tracked.
        provider_address: Provider whose fees and sequence numbers are tracked.
        keeper_address: Account whose native balance is tracked.
    """

    chain_id: str
    chain_client: ChainClientPort
    contract_client: ContractClientPort | None = None
    provider_address: object | None = None
    keeper_address: object | None = None


@dataclass
class TrackerConfig:
    """Intervals, in seconds, between sampler rounds.

    Attributes:
        track_interval: Balance, provider and accrued fee rounds.
        block_lag_interval: Block timestamp lag rounds.
    """

    track_interval: float = DEFAULT_TRACK_INTERVAL
    block_lag_interval: float = DEFAULT_TRACK_INTERVAL

    def __post_init__(self) -> None:
        if self.track_interval <= 0 or self.block_lag_interval <= 0:
            raise ValueError("Tracker intervals must be positive")
