"""Package-wide logger."""

from __future__ import annotations

import logging

logger = logging.getLogger("arcmini")

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    if not any(getattr(h, "_arcmini", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._arcmini = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
