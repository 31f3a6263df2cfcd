"""Point-in-time network interface throughput reporter.

Reads the per-interface byte counters from ``/proc/net/dev``, diffs them
against the snapshot saved by the previous invocation and prints the
receive/transmit rate of every interface, much like ``ifstat`` from iproute2.
"""

__version__ = "0.1.0"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    level: str | None = None,
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a ``loguru`` stderr sink and enable the package logger.

    ``level`` wins over ``LOGURU_LEVEL``; without either the sink logs at INFO.
    """
    os.environ["LOGURU_LEVEL"] = level or os.getenv("LOGURU_LEVEL", "INFO")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"skiplog": False})
    glogger.enable(__name__)


from netifstat.exceptions import (  # noqa: E402
    CorruptStore,
    MalformedLine,
    NegativeInterval,
    NetIfstatError,
    SourceUnavailable,
    StoreWriteFailure,
)
from netifstat.models import DeviceRates, DeviceStatistics, StatisticsSnapshot, subtract_statistics  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "DeviceRates",
    "DeviceStatistics",
    "StatisticsSnapshot",
    "subtract_statistics",
    "NetIfstatError",
    "SourceUnavailable",
    "MalformedLine",
    "CorruptStore",
    "StoreWriteFailure",
    "NegativeInterval",
]
