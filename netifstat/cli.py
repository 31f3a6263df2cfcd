"""CLI entry point for the interface throughput reporter.

Each invocation prints the rates since the previous invocation that used the
same history file. The first invocation has no baseline and shows the
absolute counters as infinite rates.

Examples:
  netifstat -f ~/.cache/netifstat.json
  netifstat -f /run/netifstat.json --hide-zero-interfaces --sort
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger
from tabulate import tabulate

from netifstat import __version__, configure_logging, store
from netifstat.config import IfstatConfig
from netifstat.exceptions import NetIfstatError
from netifstat.formatters import render
from netifstat.procfs import PROC_NET_DEV_PATH, read_proc_net_dev
from netifstat.rates import diff, interval_seconds


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the reporter."""
    parser = argparse.ArgumentParser(
        prog="netifstat",
        description=(
            "Show network device speed from /proc/net/dev (see man 5 proc), "
            "analogous to ifstat from the iproute2 package."
        ),
    )
    parser.add_argument(
        "-f",
        "--history-file",
        required=True,
        help="Name of a history file",
    )
    parser.add_argument(
        "-z",
        "--hide-zero-interfaces",
        action="store_true",
        help="Skip interfaces whose receive and transmit counters are both zero",
    )
    parser.add_argument(
        "-Z",
        "--hide-zero-values",
        action="store_true",
        help="Leave zero rates blank instead of printing them",
    )
    parser.add_argument(
        "-s",
        "--sort",
        action="store_true",
        help="Sort interfaces by total traffic (descending) instead of by name",
    )
    parser.add_argument(
        "--source",
        default=str(PROC_NET_DEV_PATH),
        help=f"Statistics table to read (default: {PROC_NET_DEV_PATH})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(args)


def _log_startup_banner(config: IfstatConfig) -> None:
    rows = [
        ["version", __version__],
        ["source", str(config.source)],
        ["history file", str(config.history_file)],
    ]
    logger.opt(raw=True).debug("\n{}\n", tabulate(rows, tablefmt="mixed_grid"))


def run(config: IfstatConfig) -> str:
    """Read, diff, persist and render; return the table text."""
    if store.exists(config.history_file):
        logger.debug(f"File `{config.history_file}` exists")
        old = store.load(config.history_file)
        new = read_proc_net_dev(hide_zero=config.hide_zero_interfaces, path=config.source)
        deltas = diff(new.devices, old.devices)
        store.save(config.history_file, new)
        # after saving, so a bogus stored timestamp is replaced for the next run
        seconds = interval_seconds(new, old)
        logger.debug(f"Interval = {seconds} s")
    else:
        logger.debug(f"File `{config.history_file}` does not exist")
        new = read_proc_net_dev(hide_zero=config.hide_zero_interfaces, path=config.source)
        store.save(config.history_file, new)
        deltas = new.devices
        seconds = 0.0

    return render(
        deltas,
        new,
        seconds,
        hide_zero_values=config.hide_zero_values,
        sort_by_magnitude=config.sort_by_magnitude,
    )


def main(args: list[str] | None = None) -> None:
    """Main entry point for the reporter CLI."""
    parsed = parse_args(args)
    config = IfstatConfig.from_args(parsed)

    configure_logging("DEBUG" if config.verbose else None)
    if config.verbose:
        _log_startup_banner(config)

    try:
        table = run(config)
    except NetIfstatError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)

    print(table)


if __name__ == "__main__":
    main()
