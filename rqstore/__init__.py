"""Building blocks for a replicated SQLite store: database configuration,
cluster members, snapshots, peer configurations and transport wrappers."""

__version__ = "0.1.0"