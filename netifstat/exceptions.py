"""Exception hierarchy for the throughput reporter."""

from __future__ import annotations

from pathlib import Path


class NetIfstatError(Exception):
    """Base exception for all reporter errors."""


class SourceUnavailable(NetIfstatError):
    """The live statistics source could not be opened or read."""


class MalformedLine(NetIfstatError):
    """A line of the statistics source has missing or non-numeric fields."""

    def __init__(self, message: str, path: str | Path | None = None, line_number: int | None = None):
        self.path = path
        self.line_number = line_number
        if path is not None and line_number is not None:
            message = f"{path}:{line_number}: {message}"
        super().__init__(message)


class CorruptStore(NetIfstatError):
    """The history file is unreadable or structurally invalid."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = path
        super().__init__(message)


class StoreWriteFailure(NetIfstatError):
    """The history file could not be created, written or flushed."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = path
        super().__init__(message)


class NegativeInterval(NetIfstatError):
    """The stored snapshot is newer than the live one."""

    def __init__(self, message: str, seconds: float | None = None):
        self.seconds = seconds
        super().__init__(message)
