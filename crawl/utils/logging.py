"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys

from crawl.config import GameConfig

# Library loggers (uvicorn, fastapi, asyncio) stay at WARNING or above
_THIRD_PARTY_FLOOR = logging.WARNING


def setup_logging(level: str | None = None) -> None:
    """Send every log record to stdout in one format.

    *level* applies to the ``crawl`` loggers and defaults to
    ``GameConfig.log_level``. At INFO the output is one line per run, floor,
    kill and death; DEBUG adds every enemy decision and rejected step.
    """
    if level is None:
        level = GameConfig().log_level
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-28s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(max(numeric_level, _THIRD_PARTY_FLOOR))
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("crawl").setLevel(numeric_level)
