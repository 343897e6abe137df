"""Errors raised by client adapters at the RPC boundary."""


class ReadError(Exception):
    """Base class for failed remote reads."""


class TransportError(ReadError):
    """A chain RPC request failed (connection, timeout, bad response)."""


class CallError(ReadError):
    """A contract call failed (reverted, undecodable, or transport failure)."""
