"""Counter deltas and rates between two snapshots."""

from __future__ import annotations

import math

from loguru import logger

from netifstat.exceptions import NegativeInterval
from netifstat.models import DeviceRates, StatisticsSnapshot, subtract_statistics


def diff(new: DeviceRates, old: DeviceRates) -> DeviceRates:
    """Return per-device ``new - old`` for devices present in both mappings.

    Devices without a baseline in ``old`` are dropped, as are devices that
    disappeared from ``new``.
    """
    result: DeviceRates = {}
    for ifname, new_stat in new.items():
        old_stat = old.get(ifname)
        if old_stat is None:
            logger.debug(f"No baseline for {ifname}, skipping")
            continue
        if new_stat.rx < old_stat.rx or new_stat.tx < old_stat.tx:
            logger.warning(f"Counters of {ifname} went backwards (interface reset?), delta wraps around")
        result[ifname] = subtract_statistics(new_stat, old_stat)
    return result


def interval_seconds(new: StatisticsSnapshot, old: StatisticsSnapshot) -> float:
    """Return the seconds elapsed from ``old`` to ``new``.

    Raises:
        NegativeInterval: if ``old`` was taken after ``new``.
    """
    seconds = (new.timestamp - old.timestamp).total_seconds()
    if seconds < 0:
        raise NegativeInterval(
            f"Duration is negative: stored snapshot {old.timestamp.isoformat()} "
            f"is newer than {new.timestamp.isoformat()}",
            seconds=seconds,
        )
    return seconds


def rate(count: int, seconds: float) -> float:
    """Return ``count / seconds`` with IEEE semantics for a zero interval."""
    if seconds == 0:
        return math.inf if count > 0 else math.nan
    return count / seconds
