"""Shared fakes for the client ports and the metrics sink."""

import asyncio
from collections.abc import Hashable
from dataclasses import dataclass, field

from keeper_telemetry.adapters.sink import GaugeFamily, GaugeSeries, KeeperMetrics
from keeper_telemetry.core.errors import CallError, TransportError
from keeper_telemetry.core.models import Block, ProviderInfoSnapshot

KEEPER = "0x00000000000000000000000000000000000000aa"
PROVIDER = "0x00000000000000000000000000000000000000bb"


@dataclass
class FakeChainClient:
    """In-memory ChainClientPort with switchable failures."""

    balance: int | None = 0
    block: Block | None = field(default_factory=lambda: Block(timestamp=0))
    fail: bool = False
    hang: bool = False
    calls: int = 0

    async def _enter(self) -> None:
        self.calls += 1
        if self.hang:
            await asyncio.Event().wait()
        if self.fail:
            raise TransportError("connection refused")

    async def get_balance(self, address: object) -> int | None:
        await self._enter()
        return self.balance

    async def get_latest_block(self) -> Block | None:
        await self._enter()
        return self.block


@dataclass
class FakeContractClient:
    """In-memory ContractClientPort with switchable failures."""

    provider_info: ProviderInfoSnapshot = field(
        default_factory=lambda: ProviderInfoSnapshot(
            accrued_fees_in_wei=0,
            fee_in_wei=0,
            sequence_number=0,
            end_sequence_number=0,
            current_commitment_sequence_number=0,
        )
    )
    accrued_fees: int = 0
    fail: bool = False
    hang: bool = False
    calls: int = 0

    async def _enter(self) -> None:
        self.calls += 1
        if self.hang:
            await asyncio.Event().wait()
        if self.fail:
            raise CallError("execution reverted")

    async def get_provider_info(self, address: object) -> ProviderInfoSnapshot:
        await self._enter()
        return self.provider_info

    async def get_accrued_fees(self) -> int:
        await self._enter()
        return self.accrued_fees


class CountingGaugeFamily(GaugeFamily):
    """GaugeFamily that counts get_or_create calls."""

    def __init__(self, name: str, description: str = "") -> None:
        super().__init__(name, description)
        self.get_or_create_calls = 0

    def get_or_create(self, label: Hashable) -> GaugeSeries:
        self.get_or_create_calls += 1
        return super().get_or_create(label)


def counting_metrics() -> KeeperMetrics:
    """Return a KeeperMetrics whose families all count get_or_create calls."""
    metrics = KeeperMetrics()
    for family in metrics.families():
        setattr(
            metrics, family.name, CountingGaugeFamily(family.name, family.description)
        )
    return metrics


def total_get_or_create_calls(metrics: KeeperMetrics) -> int:
    return sum(family.get_or_create_calls for family in metrics.families())
