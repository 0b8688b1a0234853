from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "airport_system"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the package logger using ``config``.

    Calling it again replaces the handler installed by a previous call
    rather than stacking a second one.
    """
    config = config or get_config().observability
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if handler.get_name() == PACKAGE_LOGGER:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler.set_name(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(config.level.upper())

    logger.debug("Logging configured", extra={"level": config.level})
    return logger
