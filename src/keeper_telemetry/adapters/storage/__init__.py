"""Storage adapters implementing core ports."""

from keeper_telemetry.adapters.storage.ring_buffer import RingBufferLogStorage

__all__ = ["RingBufferLogStorage"]
