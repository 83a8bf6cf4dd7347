"""Logging configuration for the CLI and the API server."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-28s | %(message)s"


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Route every ``tactics.*`` logger (and the root) to one stream handler."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    # Per-request access lines drown out the encounter trace.
    logging.getLogger("uvicorn.access").setLevel(max(numeric_level, logging.WARNING))
