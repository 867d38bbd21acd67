"""Structured logging setup. Read-only config; no business logic."""

import logging
import sys

from knnschema.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(level_name: str | None = None) -> None:
    """
    Install a single stdout handler on the root logger. Level comes from Settings
    unless `level_name` overrides it; unknown names fall back to INFO.
    """
    name = level_name or get_settings().log_level
    level = getattr(logging, name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
