"""Logging configuration."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure process-wide logging from ``level`` or the LOG_LEVEL env var."""

    level_name = str(level or os.getenv("LOG_LEVEL", "INFO")).upper()
    resolved = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # bs4 falls back to chatty warnings on odd markup
    logging.getLogger("bs4").setLevel(logging.ERROR)
