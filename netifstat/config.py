"""Run configuration handed from the command line to the report pipeline."""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import BaseModel

from netifstat.procfs import PROC_NET_DEV_PATH


class IfstatConfig(BaseModel):
    """Settings for one reporter invocation."""

    history_file: Path
    source: Path = PROC_NET_DEV_PATH
    hide_zero_interfaces: bool = False
    hide_zero_values: bool = False
    sort_by_magnitude: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, parsed: argparse.Namespace) -> IfstatConfig:
        return cls(
            history_file=parsed.history_file,
            source=parsed.source,
            hide_zero_interfaces=parsed.hide_zero_interfaces,
            hide_zero_values=parsed.hide_zero_values,
            sort_by_magnitude=parsed.sort,
            verbose=parsed.verbose,
        )
