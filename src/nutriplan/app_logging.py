"""Logging setup for the command line."""

import logging

LOGGER_NAME = "nutriplan"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach one stderr handler to the package logger.

    Calling it again only changes the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
