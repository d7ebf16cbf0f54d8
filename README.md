# rqstore

Building blocks for a SQLite database that is replicated through a consensus
log. The package holds the parts of such a store that stand on their own.

## Modules

- `rqstore.config`: `DBConfig` records whether the database lives in memory
  (`memory`), an explicit on-disk path (`on_disk_path`) and whether
  foreign-key constraints are enforced (`fk_constraints`). `to_dict()` gives
  its JSON-ready form and leaves out an empty on-disk path.
- `rqstore.server`: `Server` describes a cluster member by `id`, `addr` and
  `suffrage`. `new_server(id, addr, voter)` builds one with suffrage
  `"voter"` or `"Nonvoter"`. `Servers` is a list of servers. Its entries may be
  `None`. `Servers.is_read_only(id)` returns `(read_only, found)`, and
  `Servers.sorted_by_id()` returns a new collection ordered by ID.
- `rqstore.transport`: `Listener` is an abstract listener with `dial`,
  `accept`, `close` and `addr`. `Transport` wraps a listener and passes those
  calls through to it.
- `rqstore.database`: `create_in_memory(data, fk_constraints)` opens an
  in-memory SQLite connection and fills it from serialized bytes when they are
  non-empty. `create_on_disk(data, path, fk_constraints)` removes any file at
  `path`, writes `data` there when it is not `None`, and opens it.
  `serialize(conn)` returns the whole database as bytes.
- `rqstore.snapshot`: `FSMSnapshot(database)` writes a database image to a
  `SnapshotSink`. The image starts with a marker, then holds the size of the
  gzip-compressed database and the compressed bytes. If anything fails, the
  sink is cancelled. `db_bytes_from_snapshot(stream)` reads that form back. It
  also reads the older uncompressed form, which holds the raw size and then
  the raw bytes, and it returns `None` for an empty snapshot.
  `write_uint64` and `read_uint64` encode and decode the little-endian size
  fields.
- `rqstore.recovery`: `read_peers_json(path)` loads a peers file into a list of
  `PeerServer`. The file is a JSON array of objects with `id`, `address` and an
  optional `non_voter` flag. `check_raft_configuration(servers)` raises
  `ConfigurationError` in these cases: an ID or address is empty, an ID or
  address is repeated, or there is no server with `Suffrage.VOTER`.
- `rqstore.util`: `ClusterState` (`LEADER`, `FOLLOWER`, `CANDIDATE`,
  `SHUTDOWN`, `UNKNOWN`), `path_exists`, `dir_size` (total size of all files
  under a directory), `is_new_node(raft_dir)` (true when no `raft.db` exists
  there), `enabled_from_bool` and `pretty_voter`.
- `rqstore.errors`: `NotOpenError`, `NotLeaderError`, `SelfJoinError`,
  `StaleReadError`, `OpenTimeoutError` and `InvalidBackupFormatError`. All of
  them subclass `StoreError`.

## Installing

```
pip install .
```

## Example

```python
from rqstore.database import create_in_memory, serialize
from rqstore.snapshot import FSMSnapshot, SnapshotSink, db_bytes_from_snapshot

conn = create_in_memory(None, fk_constraints=True)
conn.execute("CREATE TABLE foo (id INTEGER PRIMARY KEY, name TEXT)")
conn.execute("INSERT INTO foo(id, name) VALUES(1, 'fiona')")
conn.commit()

snapshot = FSMSnapshot(serialize(conn))
with open("snapshot.bin", "wb") as handle:
    snapshot.persist(SnapshotSink(handle))  # closes the stream when done

with open("snapshot.bin", "rb") as handle:
    data = db_bytes_from_snapshot(handle)

restored = create_in_memory(data, fk_constraints=False)
print(restored.execute("SELECT name FROM foo").fetchall())  # [('fiona',)]
```

## What this package does not do

There is no store object here. The package does not run a consensus log, does
not replicate writes between nodes and does not elect a leader. It applies no
commands, takes no backups and performs no node recovery. It also provides no
network server and no command-line program. The error classes, `ClusterState`
and the transport wrapper are there for code that builds those parts on top.

## Running the tests

```
pip install .[test]
pytest
```