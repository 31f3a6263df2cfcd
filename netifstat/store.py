"""JSON history file holding the snapshot of the previous run."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from netifstat.exceptions import CorruptStore, StoreWriteFailure
from netifstat.models import StatisticsSnapshot


def exists(path: str | Path) -> bool:
    """Return True if ``path`` is a regular file (not a directory or device)."""
    return Path(path).is_file()


def save(path: str | Path, snapshot: StatisticsSnapshot) -> None:
    """Overwrite ``path`` with ``snapshot`` serialized as JSON.

    The file is truncated and rewritten in place; an interrupted write can
    leave it corrupt.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(snapshot.model_dump_json())
            f.flush()
    except OSError as e:
        raise StoreWriteFailure(f"Failed to update statistics db {path}: {e}", path=path) from e
    logger.debug(f"Saved {len(snapshot.devices)} devices to {path}")


def load(path: str | Path) -> StatisticsSnapshot:
    """Read the snapshot stored at ``path``.

    Raises:
        CorruptStore: if the file cannot be read or does not hold a snapshot.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise CorruptStore(f"Failed to open {path}: {e}", path=path) from e

    try:
        snapshot = StatisticsSnapshot.model_validate_json(raw)
    except ValidationError as e:
        raise CorruptStore(f"Failed to parse db {path}: {e}", path=path) from e
    logger.debug(f"Loaded {len(snapshot.devices)} devices from {path} ({snapshot.timestamp.isoformat()})")
    return snapshot
