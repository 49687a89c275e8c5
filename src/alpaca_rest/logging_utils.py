"""Console/file logging setup for the command-line entry point."""

from __future__ import annotations

import logging

LOGGER_NAME = "alpaca_rest"


def setup_logger(log_level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure and return the package logger.

    Logs go to the console, plus an optional file if `log_file` is set. Once
    handlers are attached, later calls only update the level; a `log_file`
    passed on a later call is not added.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.propagate = False

    if any(not isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
