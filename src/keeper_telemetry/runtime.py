"""Periodic runtime that drives the samplers for every configured chain."""

import asyncio
import logging
from collections.abc import Coroutine, Sequence
from typing import Any

from keeper_telemetry.config import ChainTarget, TrackerConfig
from keeper_telemetry.core.ports import MetricsSinkPort
from keeper_telemetry.core.track import (
    track_accrued_pyth_fees,
    track_balance,
    track_block_timestamp_lag,
    track_provider,
)

logger = logging.getLogger(__name__)


class KeeperTracker:
    """Runs sampler rounds on a fixed interval, one loop per chain and kind.

    Every round is a fresh set of sampler invocations run concurrently.
    Failed reads are never retried; the next round simply reads again.

    Args:
        targets: Chains to track.
        metrics: Sink the samplers publish to.
        config: Round intervals.
    """

    def __init__(
        self,
        targets: Sequence[ChainTarget],
        metrics: MetricsSinkPort,
        config: TrackerConfig | None = None,
    ) -> None:
        self.targets = list(targets)
        self.metrics = metrics
        self.config = config or TrackerConfig()
        self._stopping = asyncio.Event()
        self._tasks: list[asyncio.Task[None]] = []

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def _track_coroutines(self, target: ChainTarget) -> list[Coroutine[Any, Any, None]]:
        coros = []
        if target.keeper_address is not None:
            coros.append(
                track_balance(
                    target.chain_id,
                    target.chain_client,
                    target.keeper_address,
                    self.metrics,
                )
            )
        if target.contract_client is not None:
            if target.provider_address is not None:
                coros.append(
                    track_provider(
                        target.chain_id,
                        target.contract_client,
                        target.provider_address,
                        self.metrics,
                    )
                )
            coros.append(
                track_accrued_pyth_fees(
                    target.chain_id, target.contract_client, self.metrics
                )
            )
        return coros

    async def track_once(self, target: ChainTarget) -> None:
        """Run one round of balance, provider and accrued fee samplers.

        A sampler that raises is logged and does not affect its peers.
        """
        results = await asyncio.gather(
            *self._track_coroutines(target), return_exceptions=True
        )
        for result in results:
            if isinstance(result, Exception):
                logger.error(
                    "Sampler failed - %r",
                    result,
                    exc_info=result,
                    extra={"chain_id": target.chain_id},
                )

    async def track_block_lag_once(self, target: ChainTarget) -> None:
        """Run one round of the block timestamp lag sampler."""
        await track_block_timestamp_lag(
            target.chain_id, target.chain_client, self.metrics
        )

    async def _loop(self, target: ChainTarget, kind: str, interval: float) -> None:
        round_fn = self.track_once if kind == "track" else self.track_block_lag_once
        task = asyncio.current_task()
        logger.info("Starting %s loop", kind, extra={"chain_id": target.chain_id})
        while not self._stopping.is_set():
            try:
                await round_fn(target)
            except Exception:
                logger.exception(
                    "Error in %s round", kind, extra={"chain_id": target.chain_id}
                )
            # read_once swallows cancellation of an in-flight read
            if task is not None and task.cancelling():
                raise asyncio.CancelledError
            try:
                await asyncio.wait_for(self._stopping.wait(), timeout=interval)
            except asyncio.TimeoutError:
                continue

    def start(self) -> None:
        """Spawn the tracking loops on the running event loop."""
        if self.running:
            return
        self._stopping.clear()
        self._tasks = []
        for target in self.targets:
            self._tasks.append(
                asyncio.create_task(
                    self._loop(target, "track", self.config.track_interval)
                )
            )
            self._tasks.append(
                asyncio.create_task(
                    self._loop(target, "block_lag", self.config.block_lag_interval)
                )
            )
        logger.info("Keeper tracker started for %d chain(s)", len(self.targets))

    async def stop(self) -> None:
        """Stop all loops, abandoning any read still in flight."""
        self._stopping.set()
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []
        logger.info("Keeper tracker stopped")
