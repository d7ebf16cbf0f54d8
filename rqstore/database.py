"""Creation and serialization of the SQLite database behind a store."""

from __future__ import annotations

import os
import sqlite3


def _connect(target: str, fk_constraints: bool) -> sqlite3.Connection:
    conn = sqlite3.connect(target, check_same_thread=False)
    try:
        conn.execute(f"PRAGMA foreign_keys = {'ON' if fk_constraints else 'OFF'}")
    except sqlite3.Error:
        conn.close()
        raise
    return conn


def _validate(conn: sqlite3.Connection) -> None:
    """Touch the schema so that corrupt contents are reported now, not later."""
    try:
        conn.execute("SELECT count(*) FROM sqlite_master").fetchone()
    except sqlite3.Error:
        conn.close()
        raise


def create_in_memory(
    data: bytes | None, fk_constraints: bool
) -> sqlite3.Connection:
    """Return an in-memory database, initialised from ``data`` when it is non-empty."""
    conn = _connect(":memory:", fk_constraints)
    if data:
        try:
            conn.deserialize(bytes(data))
            # Deserializing replaces the connection's state, so reapply the pragma.
            conn.execute(
                f"PRAGMA foreign_keys = {'ON' if fk_constraints else 'OFF'}"
            )
        except sqlite3.Error:
            conn.close()
            raise
        _validate(conn)
    return conn


def create_on_disk(
    data: bytes | None, path: str | os.PathLike[str], fk_constraints: bool
) -> sqlite3.Connection:
    """Open an on-disk database at ``path``.

    Any preexisting file is removed first. If ``data`` is not ``None`` the file
    is then written with those contents before it is opened.
    """
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    if data is not None:
        with open(path, "wb") as handle:
            handle.write(data)
        os.chmod(path, 0o660)
    conn = _connect(os.fspath(path), fk_constraints)
    _validate(conn)
    return conn


def serialize(conn: sqlite3.Connection) -> bytes:
    """Return the full contents of the database as bytes."""
    return conn.serialize()