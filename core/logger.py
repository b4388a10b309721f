"""
Service logger setup

Configures the stdlib logging tree for a service or operator script.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_service_logger(
    service_name: str,
    level: str = "INFO",
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
    enable_console: bool = True,
) -> logging.Logger:
    """
    Configure the root logger and return the service logger.

    Safe to call more than once: handlers installed by a previous call are
    replaced, never duplicated.

    Args:
        service_name: Name of the returned logger
        level: Log level name (DEBUG, INFO, ...)
        log_format: logging format string
        log_file: Optional file path for an additional file handler
        enable_console: Whether to log to stdout

    Returns:
        Logger named after the service
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    formatter = logging.Formatter(log_format)

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for handler in list(root.handlers):
        if getattr(handler, "_service_handler", False):
            root.removeHandler(handler)
            handler.close()

    handlers = []
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(numeric_level)
        handler._service_handler = True
        root.addHandler(handler)

    # httpx logs every request at INFO; the gateway already does that at DEBUG
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))

    logger = logging.getLogger(service_name)
    logger.setLevel(numeric_level)
    return logger


__all__ = ["setup_service_logger", "DEFAULT_FORMAT"]
