"""Lightweight logging setup for the CLI."""

from __future__ import annotations

import logging
import sys


def configure_logging(level: int | str = logging.WARNING) -> None:
    # stdout belongs to user-facing messages; diagnostics go to stderr.
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
