"""Logging helpers for the gov spam gate."""

from __future__ import annotations

import logging
from pathlib import Path

GATE_LOGGER_NAME = "mempool_admission"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.INFO, log_path: str | None = None) -> logging.Logger:
    """Attach a handler to the package logger, leaving the node's root logger alone.

    Calling it again only updates the level.
    """
    gate_logger = logging.getLogger(GATE_LOGGER_NAME)
    gate_logger.setLevel(level)
    if gate_logger.handlers:
        return gate_logger
    if log_path:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    gate_logger.addHandler(handler)
    return gate_logger
