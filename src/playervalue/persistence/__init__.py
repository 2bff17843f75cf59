"""Weight configuration lifecycle and snapshot storage."""

from playervalue.errors import PersistFailure, RestoreFailure

from .backends import MemorySnapshotBackend, SnapshotBackend, SQLiteSnapshotBackend
from .store import SNAPSHOT_KEY, ConfigStore
from .weights import (
    DEFAULT_WEIGHTS,
    load_default,
    reset_to_default,
    restore,
    serialize,
    update_weight,
)

__all__ = [
    "ConfigStore",
    "DEFAULT_WEIGHTS",
    "MemorySnapshotBackend",
    "PersistFailure",
    "RestoreFailure",
    "SNAPSHOT_KEY",
    "SQLiteSnapshotBackend",
    "SnapshotBackend",
    "load_default",
    "reset_to_default",
    "restore",
    "serialize",
    "update_weight",
]
