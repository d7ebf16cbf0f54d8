"""Small helpers shared by the store: node state, paths and wording."""

from __future__ import annotations

import os
import stat
from enum import IntEnum

RAFT_DB_PATH = "raft.db"


class ClusterState(IntEnum):
    """The Raft states the current node can be in."""

    LEADER = 0
    FOLLOWER = 1
    CANDIDATE = 2
    SHUTDOWN = 3
    UNKNOWN = 4


def path_exists(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` exists, without following a final symlink."""
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def dir_size(path: str | os.PathLike[str]) -> int:
    """Return the total size in bytes of all non-directory entries under ``path``.

    Symlinks are not followed. An error reaching any entry is raised.
    """
    info = os.lstat(path)
    if not stat.S_ISDIR(info.st_mode):
        return info.st_size
    total = 0
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                total += dir_size(entry.path)
            else:
                total += entry.stat(follow_symlinks=False).st_size
    return total


def is_new_node(raft_dir: str | os.PathLike[str]) -> bool:
    """Return whether a node using ``raft_dir`` would be a brand-new node."""
    return not path_exists(os.path.join(raft_dir, RAFT_DB_PATH))


def enabled_from_bool(value: bool) -> str:
    """Return "enabled" or "disabled"."""
    return "enabled" if value else "disabled"


def pretty_voter(voter: bool) -> str:
    """Return "voter" or "non-voter"."""
    return "voter" if voter else "non-voter"