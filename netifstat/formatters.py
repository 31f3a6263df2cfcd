"""Terminal table of per-interface receive/transmit rates."""

from __future__ import annotations

from netifstat.models import DeviceRates, StatisticsSnapshot
from netifstat.rates import rate
from netifstat.units import format_rate

MIN_IFNAME_WIDTH = 10
NUMBER_WIDTH = 30


class TerminalFormatter:
    """Format counter deltas as an aligned plain-text rate table.

    ``ordering_source`` supplies the full device list (for the name column
    width and row order); devices in it without a delta get no row.
    """

    def __init__(
        self,
        deltas: DeviceRates,
        ordering_source: StatisticsSnapshot,
        interval_seconds: float,
        hide_zero_values: bool = False,
        sort_by_magnitude: bool = False,
    ) -> None:
        self.deltas = deltas
        self.ordering_source = ordering_source
        self.interval_seconds = interval_seconds
        self.hide_zero_values = hide_zero_values
        self.sort_by_magnitude = sort_by_magnitude

    @property
    def ifname_width(self) -> int:
        return max([MIN_IFNAME_WIDTH, *(len(name) for name in self.ordering_source.devices)])

    def ordered_devices(self) -> list[str]:
        """Return the names to print, in display order."""
        names = [name for name in self.ordering_source.devices if name in self.deltas]
        if self.sort_by_magnitude:
            # sorted() is stable: equal totals keep the source order
            return sorted(names, key=lambda name: self.deltas[name].total, reverse=True)
        return sorted(names)

    def _value(self, count: int) -> str:
        if self.hide_zero_values and count == 0:
            return " " * NUMBER_WIDTH
        return f"{format_rate(rate(count, self.interval_seconds)):>{NUMBER_WIDTH}}"

    def format(self) -> str:
        """Return the complete table as a string (header plus one row per device)."""
        w = self.ifname_width
        lines: list[str] = [f"{'Interface':>{w}} {'Receive':^{NUMBER_WIDTH}} {'Transmit':^{NUMBER_WIDTH}}"]
        for name in self.ordered_devices():
            stat = self.deltas[name]
            lines.append(f"{name:>{w}} {self._value(stat.rx)} {self._value(stat.tx)}")
        return "\n".join(lines)


def render(
    deltas: DeviceRates,
    ordering_source: StatisticsSnapshot,
    interval_seconds: float,
    hide_zero_values: bool = False,
    sort_by_magnitude: bool = False,
) -> str:
    """Render the rate table for ``deltas`` over ``interval_seconds``."""
    return TerminalFormatter(
        deltas,
        ordering_source,
        interval_seconds,
        hide_zero_values=hide_zero_values,
        sort_by_magnitude=sort_by_magnitude,
    ).format()
