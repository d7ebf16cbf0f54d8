"""Point-in-time snapshots of the database and their on-disk encoding.

A snapshot is written as a little-endian ``uint64`` marker holding the
maximum value (flagging compressed contents), then the size of the
gzip-compressed database, then the compressed bytes. Older snapshots hold
the size of the raw database followed by the raw bytes.
"""

from __future__ import annotations

import gzip
import logging
import struct
import time
from dataclasses import dataclass, field
from typing import BinaryIO

_UINT64 = struct.Struct("<Q")
_UINT64_SIZE = _UINT64.size
_COMPRESSED_MARKER = 2**64 - 1

_log = logging.getLogger("rqstore.store")


def write_uint64(value: int) -> bytes:
    """Encode ``value`` as eight little-endian bytes."""
    try:
        return _UINT64.pack(value)
    except struct.error as exc:
        raise ValueError(f"value out of range for uint64: {value}") from exc


def read_uint64(data: bytes) -> int:
    """Decode a little-endian ``uint64`` from the first eight bytes of ``data``."""
    if len(data) < _UINT64_SIZE:
        raise ValueError("unexpected EOF")
    return _UINT64.unpack_from(data)[0]


class SnapshotSink:
    """Destination for a persisted snapshot, wrapping a writable binary stream."""

    def __init__(self, stream: BinaryIO, id: str = "1") -> None:
        self.stream = stream
        self.id = id
        self.cancelled = False

    def write(self, data: bytes) -> int:
        """Write ``data`` to the underlying stream."""
        return self.stream.write(data)

    def close(self) -> None:
        """Finish the snapshot; closing twice is harmless."""
        if not self.stream.closed:
            self.stream.close()

    def cancel(self) -> None:
        """Abandon the snapshot."""
        self.cancelled = True
        if not self.stream.closed:
            self.stream.close()


@dataclass
class FSMSnapshot:
    """Serialized copy of the database, ready to be persisted.

    ``database`` may be ``None`` when no database contents were available.
    """

    database: bytes | None
    logger: logging.Logger = field(default=_log)
    start_time: float = field(default_factory=time.monotonic)

    def compressed_database(self) -> bytes | None:
        """Return the database gzip-compressed at best compression, or ``None``."""
        if self.database is None:
            return None
        return gzip.compress(self.database, compresslevel=9)

    def persist(self, sink: SnapshotSink) -> None:
        """Write the snapshot to ``sink``, cancelling the sink on any failure."""
        try:
            try:
                sink.write(write_uint64(_COMPRESSED_MARKER))
                compressed = self.compressed_database()
                if compressed is not None:
                    sink.write(write_uint64(len(compressed)))
                    sink.write(compressed)
                else:
                    self.logger.info("no database data available for snapshot")
                    sink.write(write_uint64(0))
                sink.close()
            except Exception:
                sink.cancel()
                raise
        finally:
            elapsed = time.monotonic() - self.start_time
            self.logger.info("snapshot and persist took %.3fs", elapsed)

    def release(self) -> None:
        """Drop the held copy of the database once the snapshot is finished with."""
        self.database = None


def db_bytes_from_snapshot(stream: BinaryIO) -> bytes | None:
    """Read a persisted snapshot and return the raw database, or ``None`` if empty.

    Both the compressed format and the older uncompressed one are accepted.
    The stream is read to its end but not closed.
    """
    data = stream.read()
    offset = 0

    try:
        size = read_uint64(data[offset : offset + _UINT64_SIZE])
    except ValueError as exc:
        raise ValueError(f"read compression check: {exc}") from exc
    offset += _UINT64_SIZE

    compressed = False
    if size == _COMPRESSED_MARKER:
        compressed = True
        try:
            size = read_uint64(data[offset : offset + _UINT64_SIZE])
        except ValueError as exc:
            raise ValueError(f"read compressed size: {exc}") from exc
        offset += _UINT64_SIZE

    if size == 0:
        return None

    if offset + size > len(data):
        raise ValueError(
            f"snapshot truncated: need {size} bytes, have {len(data) - offset}"
        )
    payload = data[offset : offset + size]
    if not compressed:
        return bytes(payload)
    try:
        return gzip.decompress(payload)
    except (OSError, EOFError) as exc:
        raise ValueError(f"SQLite database decompress: {exc}") from exc