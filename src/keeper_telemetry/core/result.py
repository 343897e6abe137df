"""Result type returned from the RPC read boundary.

Samplers never see a raised exception from a client. They await
read_once() and branch on Ok or Err instead.
"""

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ReadFailure(Enum):
    """Why a remote read produced no usable value."""

    TRANSIENT = "transient_read_failure"
    MISSING_DATA = "missing_data"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful read."""

    value: T


@dataclass(frozen=True)
class Err:
    """A failed read.

    Attributes:
        kind: Failure category.
        error: The exception raised by the client, if any.
    """

    kind: ReadFailure
    error: BaseException | None = None

    def describe(self) -> str:
        """Return a short human-readable reason for log messages."""
        if self.error is None:
            return self.kind.value
        return f"{type(self.error).__name__}: {self.error!r}"


async def read_once(call: Awaitable[T | None]) -> Ok[T] | Err:
    """Await a single client call and capture its outcome.

    Any exception raised by the call becomes Err(TRANSIENT). Cancellation of
    the enclosing task while the call is outstanding is treated the same way,
    so a sampler never propagates a fault to its scheduler. A call that
    succeeds with None becomes Err(MISSING_DATA).

    Args:
        call: The awaitable returned by a client method.

    Returns:
        Ok with the returned value, or Err describing the failure.
    """
    try:
        value = await call
    except asyncio.CancelledError as e:
        return Err(ReadFailure.TRANSIENT, e)
    except Exception as e:
        return Err(ReadFailure.TRANSIENT, e)
    if value is None:
        return Err(ReadFailure.MISSING_DATA)
    return Ok(value)
