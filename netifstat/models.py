"""Pydantic models for interface counter snapshots."""

from __future__ import annotations

from typing import Dict

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

U64_MAX = 2**64 - 1


class DeviceStatistics(BaseModel):
    """Cumulative byte counters of one interface since it was brought up."""

    model_config = ConfigDict(frozen=True, strict=True)

    rx: int = Field(ge=0, le=U64_MAX)
    tx: int = Field(ge=0, le=U64_MAX)

    @property
    def total(self) -> int:
        return self.rx + self.tx


# Interface name -> counters. Consumers choose their own ordering.
DeviceRates = Dict[str, DeviceStatistics]


class StatisticsSnapshot(BaseModel):
    """All interface counters as observed at one instant."""

    model_config = ConfigDict(frozen=True, strict=True)

    timestamp: AwareDatetime
    devices: DeviceRates = Field(default_factory=dict)


def subtract_statistics(a: DeviceStatistics, b: DeviceStatistics) -> DeviceStatistics:
    """Return ``a - b`` per counter with unsigned 64-bit wraparound.

    A counter that went backwards (interface reset) wraps instead of going
    negative.
    """
    return DeviceStatistics(
        rx=(a.rx - b.rx) & U64_MAX,
        tx=(a.tx - b.tx) & U64_MAX,
    )
