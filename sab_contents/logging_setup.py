"""Map CLI verbosity onto stdlib logging for the ``sab_contents`` loggers."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "sab_contents"


def level_for(verbose: int) -> int:
    """Return the logging level for a ``--verbose`` count."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbose: int = 0) -> logging.Logger:
    """Attach a single stream handler to the package logger at the chosen level."""
    logger = logging.getLogger("sab_contents")
    logger.setLevel(level_for(verbose))
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["HANDLER_NAME", "LOG_FORMAT", "configure_logging", "level_for"]
