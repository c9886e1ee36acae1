"""Logging configuration for soundgraph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from soundgraph.services.config_service import ConfigService


def setup_logging(config: "ConfigService") -> logging.Logger:
    """Attach a console handler to the package logger using the logging config section."""
    logger = logging.getLogger("soundgraph")
    logger.setLevel(str(config.get("logging.level", "INFO")).upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter(config.get("logging.format", "%(asctime)s | %(levelname)s | %(message)s"))
    )
    logger.addHandler(console_handler)
    return logger
