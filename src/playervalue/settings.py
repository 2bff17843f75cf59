"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

_DB_PATH_ENV = "PLAYERVALUE_DB_PATH"
_PLAYERS_CSV_ENV = "PLAYERVALUE_PLAYERS_CSV"
_LOG_LEVEL_ENV = "PLAYERVALUE_LOG_LEVEL"

_DEFAULT_DB_PATH = Path.home() / ".playervalue" / "playervalue.sqlite"
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    db_path: Path | str
    players_csv: Optional[Path]
    log_level: int


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if not raw:
        return None
    return Path(raw).expanduser()


def _env_log_level(name: str, default: str) -> int:
    raw = os.getenv(name)
    if raw is None:
        return logging.getLevelName(default)
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        logger.warning("Invalid log level for %s: %s; using default %s", name, raw, default)
        return logging.getLevelName(default)
    return level


def _db_path() -> Path | str:
    raw = os.getenv(_DB_PATH_ENV)
    if not raw:
        return _DEFAULT_DB_PATH
    # SQLite URI (e.g. "file:weights?mode=memory&cache=shared") is passed through untouched.
    if raw.startswith("file:"):
        return raw
    return Path(raw).expanduser()


def load_settings() -> Settings:
    return Settings(
        db_path=_db_path(),
        players_csv=_env_path(_PLAYERS_CSV_ENV),
        log_level=_env_log_level(_LOG_LEVEL_ENV, _DEFAULT_LOG_LEVEL),
    )
