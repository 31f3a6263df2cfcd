"""Shared fixtures for the netifstat test suite."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from netifstat.models import DeviceStatistics, StatisticsSnapshot

NET_DEV_HEADER = (
    "Inter-|   Receive                                                |  Transmit\n"
    " face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed\n"
)


def net_dev_line(name: str, rx: int | str, tx: int | str) -> str:
    """Return one /proc/net/dev row with the given rx/tx byte counters."""
    return f"{name:>6}: {rx:>8} 100 0 0 0 0 0 0 {tx:>8} 50 0 0 0 0 0 0\n"


@pytest.fixture()
def net_dev_file(tmp_path):
    """Factory fixture writing a /proc/net/dev-like file from (name, rx, tx) rows."""

    def _make(*rows, raw: str | bytes | None = None):
        path = tmp_path / "net_dev"
        if raw is not None:
            data = raw if isinstance(raw, bytes) else raw.encode()
        else:
            data = (NET_DEV_HEADER + "".join(net_dev_line(*row) for row in rows)).encode()
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture()
def sample_snapshot():
    """Factory fixture returning a StatisticsSnapshot from name -> (rx, tx)."""

    def _make(devices=None, timestamp=None):
        if devices is None:
            devices = {"eth0": (2048, 1024), "lo": (500, 500)}
        return StatisticsSnapshot(
            timestamp=timestamp or datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc),
            devices={name: DeviceStatistics(rx=rx, tx=tx) for name, (rx, tx) in devices.items()},
        )

    return _make
