"""Logging setup shared by the CLI and library modules."""

import logging
from pathlib import Path

LOGGER_NAME = "threecard"


def setup_logging(level: str | int = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Configure the package logger.

    Records go to stderr, and additionally to `log_file` when given, so stdout
    only ever carries the report itself.

    Args:
        level: Logging level name or number
        log_file: Optional path for a file handler

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
