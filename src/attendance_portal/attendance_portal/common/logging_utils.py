from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Parent of every module logger in this package, however the package was imported.
PACKAGE_LOGGER = __name__.rsplit(".common", 1)[0]


class PortalLogHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging."""

    def __init__(self, stream=None):
        super().__init__(stream)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger (idempotent)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if not any(isinstance(h, PortalLogHandler) for h in logger.handlers):
        logger.addHandler(PortalLogHandler())
    return logger
