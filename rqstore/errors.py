"""Errors raised by the store."""

from __future__ import annotations


class StoreError(Exception):
    """Base class for errors raised by the store."""

    default_message = "store error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NotOpenError(StoreError):
    """The store is not open."""

    default_message = "store not open"


class NotLeaderError(StoreError):
    """A leader-only operation was attempted on a non-leader node."""

    default_message = "not leader"


class SelfJoinError(StoreError):
    """A join request came from a node with this node's Raft ID."""

    default_message = "self-join attempted"


class StaleReadError(StoreError):
    """Running the query would violate the requested freshness."""

    default_message = "stale read"


class OpenTimeoutError(StoreError):
    """The initial logs were not applied within the allowed time."""

    default_message = "timeout waiting for initial logs application"


class InvalidBackupFormatError(StoreError):
    """The requested backup format is not valid."""

    default_message = "invalid backup format"