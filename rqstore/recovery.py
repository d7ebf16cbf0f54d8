"""Peer configurations used to force a node's cluster membership on recovery.

A peers file is a JSON array of objects, each with an ``id``, an
``address`` and an optional ``non_voter`` flag. It names the servers the
node should consider its cluster once recovery has run.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from rqstore.errors import StoreError


class Suffrage(Enum):
    """Whether a server takes part in elections and commitment."""

    VOTER = "Voter"
    NONVOTER = "Nonvoter"
    STAGING = "Staging"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PeerServer:
    """One member of a cluster membership configuration."""

    id: str
    address: str
    suffrage: Suffrage = Suffrage.VOTER


class ConfigurationError(StoreError):
    """A cluster membership configuration is malformed."""

    default_message = "invalid configuration"


def _describe(servers: list[PeerServer]) -> str:
    inner = " ".join(
        f"{{{server.suffrage} {server.id} {server.address}}}" for server in servers
    )
    return f"{{[{inner}]}}"


def check_raft_configuration(servers: Iterable[PeerServer]) -> None:
    """Check a membership configuration for common errors.

    Every server needs a non-empty ID and address, IDs and addresses must be
    unique, and at least one server must be a voter. ``ConfigurationError``
    is raised for the first problem found.
    """
    servers = list(servers)
    seen_ids: set[str] = set()
    seen_addresses: set[str] = set()
    voters = 0
    for server in servers:
        if not server.id:
            raise ConfigurationError(
                f"empty ID in configuration: {_describe(servers)}"
            )
        if not server.address:
            raise ConfigurationError(
                f"empty address in configuration: "
                f"{{{server.suffrage} {server.id} {server.address}}}"
            )
        if server.id in seen_ids:
            raise ConfigurationError(
                f"found duplicate ID in configuration: {server.id}"
            )
        seen_ids.add(server.id)
        if server.address in seen_addresses:
            raise ConfigurationError(
                f"found duplicate address in configuration: {server.address}"
            )
        seen_addresses.add(server.address)
        if server.suffrage is Suffrage.VOTER:
            voters += 1
    if voters == 0:
        raise ConfigurationError(
            f"need at least one voter in configuration: {_describe(servers)}"
        )


def read_peers_json(path: str | os.PathLike[str]) -> list[PeerServer]:
    """Read and validate a peers file, returning the servers it names.

    Servers are voters unless their entry sets ``non_voter`` to true.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"failed to decode peers file: {exc}") from exc

    if not isinstance(document, list):
        raise ConfigurationError("peers file must hold a JSON array")

    servers: list[PeerServer] = []
    for entry in document:
        if not isinstance(entry, dict):
            raise ConfigurationError("peers file entries must be JSON objects")
        peer_id = entry.get("id") or ""
        address = entry.get("address") or ""
        if not isinstance(peer_id, str) or not peer_id:
            raise ConfigurationError("empty ID in peers file")
        if not isinstance(address, str) or not address:
            raise ConfigurationError("empty address in peers file")
        suffrage = Suffrage.NONVOTER if entry.get("non_voter") else Suffrage.VOTER
        servers.append(PeerServer(id=peer_id, address=address, suffrage=suffrage))

    check_raft_configuration(servers)
    return servers