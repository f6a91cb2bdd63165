# core/logging_config.py
from __future__ import annotations

import logging
import sys

from config import settings

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once; later calls only adjust the level."""
    global _configured
    lvl = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    if not _configured:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stdout,
            level=lvl,
        )
        # noisy transport loggers
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        _configured = True
    logging.getLogger().setLevel(lvl)
