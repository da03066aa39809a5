"""Logging setup for scripts that drive the engine. The library itself only creates loggers."""

import logging
from typing import Optional, Union

from . import config

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Send log records to stderr. Defaults to BIGTWO_LOG_LEVEL."""
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
