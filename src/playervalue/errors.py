"""Exceptions raised by the weight configuration lifecycle."""

from __future__ import annotations


class PlayerValueError(Exception):
    """Base class for playervalue errors."""


class RestoreFailure(PlayerValueError, ValueError):
    """A persisted weight snapshot is missing, unparseable or structurally invalid."""


class PersistFailure(PlayerValueError, RuntimeError):
    """Writing or clearing a weight snapshot failed in the storage backend."""
