"""Cluster members and collections of them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Server:
    """Another node in the cluster."""

    id: str = ""
    addr: str = ""
    suffrage: str = ""


def new_server(id: str, addr: str, voter: bool) -> Server:
    """Return a Server whose suffrage reflects whether it votes."""
    return Server(id=id, addr=addr, suffrage="voter" if voter else "Nonvoter")


class Servers(list):
    """A list of servers; entries may be ``None``."""

    def is_read_only(self, id: str) -> tuple[bool, bool]:
        """Return ``(read_only, found)`` for the node with the given Raft ID."""
        if not id:
            return False, False
        for server in self:
            if server is not None and server.id == id:
                return server.suffrage == "Nonvoter", True
        return False, False

    def sorted_by_id(self) -> "Servers":
        """Return a new collection ordered by ascending ID."""
        return Servers(sorted(self, key=lambda server: server.id))