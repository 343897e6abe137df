"""Samplers that read on-chain state and publish it as keeper gauges.

Each sampler performs one remote read and either publishes the derived
gauges or logs the failure and returns. None of them raise to the caller.
"""

import logging
import time

from keeper_telemetry.core.metrics import as_int64, wei_to_native
from keeper_telemetry.core.models import AccountLabel, ChainIdLabel
from keeper_telemetry.core.ports import (
    ChainClientPort,
    ContractClientPort,
    MetricsSinkPort,
)
from keeper_telemetry.core.result import Err, ReadFailure, read_once

logger = logging.getLogger(__name__)

# Lag published when no block could be read; large enough to trip any alert.
INF_LAG = 1_000_000


async def track_balance(
    chain_id: str,
    client: ChainClientPort,
    address: object,
    metrics: MetricsSinkPort,
) -> None:
    """Track the native balance of address on the given chain.

    On a failed read the balance gauge is left untouched.
    """
    result = await read_once(client.get_balance(address))
    if isinstance(result, Err):
        logger.error(
            "Error while getting balance. error: %s",
            result.describe(),
            extra={
                "chain_id": chain_id,
                "address": str(address),
                "failure": result.kind.value,
            },
        )
        return

    metrics.balance.get_or_create(
        AccountLabel(chain_id=chain_id, address=str(address))
    ).set(wei_to_native(result.value))


async def track_block_timestamp_lag(
    chain_id: str,
    client: ChainClientPort,
    metrics: MetricsSinkPort,
) -> None:
    """Track server time minus latest block time for the given chain.

    Negative lag (block ahead of the local clock) is published as is. When
    the block cannot be read, INF_LAG is published instead so the lag series
    never goes stale.
    """
    result = await read_once(client.get_latest_block())
    if isinstance(result, Err):
        extra = {"chain_id": chain_id, "failure": result.kind.value}
        if result.kind is ReadFailure.MISSING_DATA:
            logger.error("Latest block is None", extra=extra)
        else:
            logger.error(
                "Failed to get latest block - %s", result.describe(), extra=extra
            )
        lag = INF_LAG
    else:
        lag = int(time.time()) - int(result.value.timestamp)

    metrics.block_timestamp_lag.get_or_create(ChainIdLabel(chain_id=chain_id)).set(
        lag
    )


async def track_provider(
    chain_id: str,
    contract: ContractClientPort,
    provider_address: object,
    metrics: MetricsSinkPort,
) -> None:
    """Track collected fees and hash chain position of a provider.

    The five provider gauges are published together after one successful
    read, or not at all.
    """
    result = await read_once(contract.get_provider_info(provider_address))
    if isinstance(result, Err):
        logger.error(
            "Error while getting provider info. error: %s",
            result.describe(),
            extra={
                "chain_id": chain_id,
                "address": str(provider_address),
                "failure": result.kind.value,
            },
        )
        return

    info = result.value
    label = AccountLabel(chain_id=chain_id, address=str(provider_address))
    metrics.collected_fee.get_or_create(label).set(
        wei_to_native(info.accrued_fees_in_wei)
    )
    metrics.current_fee.get_or_create(label).set(wei_to_native(info.fee_in_wei))
    metrics.current_sequence_number.get_or_create(label).set(
        as_int64(info.sequence_number)
    )
    metrics.current_commitment_sequence_number.get_or_create(label).set(
        as_int64(info.current_commitment_sequence_number)
    )
    metrics.end_sequence_number.get_or_create(label).set(
        as_int64(info.end_sequence_number)
    )


async def track_accrued_pyth_fees(
    chain_id: str,
    contract: ContractClientPort,
    metrics: MetricsSinkPort,
) -> None:
    """Track the protocol-wide accrued fees on the given chain."""
    result = await read_once(contract.get_accrued_fees())
    if isinstance(result, Err):
        logger.error(
            "Error while getting accrued pyth fees. error: %s",
            result.describe(),
            extra={"chain_id": chain_id, "failure": result.kind.value},
        )
        return

    metrics.accrued_pyth_fees.get_or_create(ChainIdLabel(chain_id=chain_id)).set(
        wei_to_native(result.value)
    )
