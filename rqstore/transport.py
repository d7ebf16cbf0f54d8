"""Network layer offered to the consensus system."""

from __future__ import annotations

import socket
from abc import ABC, abstractmethod
from typing import Any


class Listener(ABC):
    """A network listener that can also dial out to other nodes."""

    @abstractmethod
    def dial(self, address: str, timeout: float) -> socket.socket:
        """Open a connection to ``address`` within ``timeout`` seconds."""

    @abstractmethod
    def accept(self) -> socket.socket:
        """Wait for and return the next incoming connection."""

    @abstractmethod
    def close(self) -> None:
        """Stop listening."""

    @abstractmethod
    def addr(self) -> Any:
        """Return the address the listener is bound to."""


class Transport:
    """Wraps a Listener to provide the network service used by Raft."""

    def __init__(self, listener: Listener | None) -> None:
        self.listener = listener

    def dial(self, addr: str, timeout: float) -> socket.socket:
        """Create a new connection to the server at ``addr``."""
        return self.listener.dial(str(addr), timeout)

    def accept(self) -> socket.socket:
        """Wait for the next connection."""
        return self.listener.accept()

    def close(self) -> None:
        """Close the transport."""
        self.listener.close()

    def addr(self) -> Any:
        """Return the binding address of the transport."""
        return self.listener.addr()