"""Parser for the kernel's per-interface counter table (``/proc/net/dev``).

The table looks like::

    Inter-|   Receive                                                |  Transmit
     face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets ...
        lo:  123456     789    0    0    0     0          0         0   123456     789 ...
      eth0: 9876543   12345    0    0    0     0          0         0  1234567    6789 ...

Two header lines, then one line per interface: the name with a trailing
colon followed by 8 receive and 8 transmit columns.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from loguru import logger

from netifstat.exceptions import MalformedLine, SourceUnavailable
from netifstat.models import U64_MAX, DeviceRates, DeviceStatistics, StatisticsSnapshot

PROC_NET_DEV_PATH = Path("/proc/net/dev")

HEADER_LINES = 2

# Token positions after whitespace splitting
NET_DEV_NAME = 0
NET_DEV_RX_BYTES = 1
NET_DEV_TX_BYTES = 9


def _parse_counter(token: str, what: str, source: str | Path, line_number: int) -> int:
    """Parse a single unsigned 64-bit counter token."""
    if not (token.isascii() and token.isdigit()):
        raise MalformedLine(f"Failed to parse {what} {token!r}", path=source, line_number=line_number)
    value = int(token)
    if value > U64_MAX:
        raise MalformedLine(f"{what} {token} exceeds 64 bits", path=source, line_number=line_number)
    return value


def parse_net_dev_lines(
    lines: Iterable[bytes],
    hide_zero: bool = False,
    source: str | Path = PROC_NET_DEV_PATH,
) -> StatisticsSnapshot:
    """Parse raw ``/proc/net/dev`` lines into a timestamped snapshot.

    Lines that are not valid UTF-8 are skipped; any decodable line with a
    missing or non-numeric field aborts the whole parse with MalformedLine.
    """
    timestamp = datetime.now(timezone.utc)
    devices: DeviceRates = {}

    for line_number, raw in enumerate(lines, start=1):
        if line_number <= HEADER_LINES:
            continue
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug(f"{source}:{line_number}: skipping undecodable line: {e}")
            continue

        tokens = line.split()
        if len(tokens) <= NET_DEV_NAME:
            raise MalformedLine("Missing interface name", path=source, line_number=line_number)
        ifname = tokens[NET_DEV_NAME].rstrip(":")

        if len(tokens) <= NET_DEV_RX_BYTES:
            raise MalformedLine(f"Missing rx bytes for {ifname}", path=source, line_number=line_number)
        rx = _parse_counter(tokens[NET_DEV_RX_BYTES], "rx bytes", source, line_number)

        if len(tokens) <= NET_DEV_TX_BYTES:
            raise MalformedLine(f"Missing tx bytes for {ifname}", path=source, line_number=line_number)
        tx = _parse_counter(tokens[NET_DEV_TX_BYTES], "tx bytes", source, line_number)

        if hide_zero and rx == 0 and tx == 0:
            logger.debug(f"Hiding {ifname}: no traffic")
            continue
        devices[ifname] = DeviceStatistics(rx=rx, tx=tx)

    return StatisticsSnapshot(timestamp=timestamp, devices=devices)


def read_proc_net_dev(hide_zero: bool = False, path: str | Path = PROC_NET_DEV_PATH) -> StatisticsSnapshot:
    """Read and parse the live statistics table at ``path``."""
    try:
        with open(path, "rb") as f:
            return parse_net_dev_lines(f, hide_zero=hide_zero, source=path)
    except OSError as e:
        raise SourceUnavailable(f"Failed to read {path}: {e}") from e
