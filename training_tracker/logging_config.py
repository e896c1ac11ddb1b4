"""Root logger bootstrap for the command-line tools."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once at program start.

    The level comes from ``level`` when given, otherwise from the
    ``LOG_LEVEL`` environment variable, defaulting to ``INFO``. Unknown level
    names fall back to ``INFO``.
    """

    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
    )
