"""Human-readable scaling of byte and bit rates."""

from __future__ import annotations

import math
from typing import Sequence

BINARY_PREFIXES: tuple[str, ...] = ("Ki", "Mi", "Gi", "Ti")
BINARY_FACTOR = 1024.0

DECIMAL_PREFIXES: tuple[str, ...] = ("K", "M", "G", "T")
DECIMAL_FACTOR = 1000.0

PRECISION = 2


def scale(value: float, prefixes: Sequence[str], factor: float) -> tuple[float, str]:
    """Scale ``value`` down the prefix ladder while it exceeds ``factor``.

    Non-finite values are returned unchanged with an empty prefix.

    >>> scale(2048.0, BINARY_PREFIXES, BINARY_FACTOR)
    (2.0, 'Ki')
    """
    if not math.isfinite(value):
        return value, ""

    new_value = value
    new_prefix = ""
    for prefix in prefixes:
        if new_value <= factor:
            break
        new_value /= factor
        new_prefix = prefix
    return new_value, new_prefix


def format_rate(bytes_per_second: float) -> str:
    """Return e.g. ``'10.00 KiB/s (81.92 Kbit/s)'`` for a byte rate."""
    byte_value, byte_prefix = scale(bytes_per_second, BINARY_PREFIXES, BINARY_FACTOR)
    bit_value, bit_prefix = scale(bytes_per_second * 8, DECIMAL_PREFIXES, DECIMAL_FACTOR)
    return f"{byte_value:.{PRECISION}f} {byte_prefix}B/s ({bit_value:.{PRECISION}f} {bit_prefix}bit/s)"
