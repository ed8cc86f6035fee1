"""Logging configuration for AWS Network Tables."""

import logging
import sys
from typing import Optional

# Package logger
logger = logging.getLogger("aws_network_tables")


def setup_logging(
    debug: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Configure logging for the query runtime.

    Args:
        debug: Enable debug level logging
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)
    logger.handlers.clear()

    # stderr only shows warnings unless debugging
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if debug else logging.WARNING)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"
            )
        )
        logger.addHandler(file_handler)

    # botocore is very chatty at DEBUG
    logging.getLogger("botocore").setLevel(logging.INFO if debug else logging.WARNING)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger, e.g. get_logger('engine') -> aws_network_tables.engine"""
    return logger.getChild(name)
