"""Logging configuration for the ProEdit backend."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def configure_logging(
    level: str = "INFO",
    format: Optional[str] = None,
    suppress_external: bool = True,
) -> logging.Logger:
    """Configure the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format: Custom format string, or None for LOG_FORMAT
        suppress_external: If True, raise noisy library loggers to WARNING

    Returns:
        The root logger
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=format or LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
        force=True,
    )

    if suppress_external:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger()
