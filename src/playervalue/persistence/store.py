"""Persist and restore the active weight configuration."""

from __future__ import annotations

import logging
import sqlite3

from playervalue.errors import PersistFailure, RestoreFailure
from playervalue.models import WeightConfiguration

from .backends import SnapshotBackend
from .weights import load_default, restore, serialize


logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "weights-config"

_STORAGE_ERRORS = (sqlite3.Error, OSError)


class ConfigStore:
    """Reads and writes one weight snapshot under a fixed key.

    The store holds no configuration itself; callers keep the committed and
    draft values and call :meth:`persist` when a draft is saved.
    """

    def __init__(self, backend: SnapshotBackend, key: str = SNAPSHOT_KEY):
        self.backend = backend
        self.key = key

    def persist(self, config: WeightConfiguration) -> None:
        payload = serialize(config)
        try:
            self.backend.write(self.key, payload)
        except _STORAGE_ERRORS as exc:
            raise PersistFailure(f"unable to save weight configuration: {exc}") from exc
        logger.info("Saved weight configuration for %d positions", len(config.root))

    def clear(self) -> None:
        try:
            self.backend.delete(self.key)
        except _STORAGE_ERRORS as exc:
            raise PersistFailure(f"unable to clear weight configuration: {exc}") from exc

    def load(self) -> WeightConfiguration:
        """Return the stored configuration, or the default one.

        A corrupt snapshot is logged and cleared so it is not retried.
        """

        try:
            snapshot = self.backend.read(self.key)
        except _STORAGE_ERRORS as exc:
            logger.warning("Unable to read weight snapshot %r: %s; using defaults", self.key, exc)
            return load_default()
        if snapshot is None:
            return load_default()
        try:
            return restore(snapshot)
        except RestoreFailure as exc:
            logger.warning("Discarding unusable weight snapshot %r: %s", self.key, exc)
            try:
                self.clear()
            except PersistFailure as clear_exc:
                logger.warning("%s", clear_exc)
            return load_default()
