"""Configuration of the underlying SQLite database."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class DBConfig:
    """How the SQLite database behind a store is created.

    ``memory`` selects an in-memory database, ``on_disk_path`` overrides the
    location of the on-disk file and ``fk_constraints`` enables foreign-key
    enforcement.
    """

    memory: bool = False
    on_disk_path: str = ""
    fk_constraints: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form; an empty on-disk path is left out."""
        result: dict[str, Any] = {"memory": self.memory}
        if self.on_disk_path:
            result["on_disk_path"] = self.on_disk_path
        result["fk_constraints"] = self.fk_constraints
        return result