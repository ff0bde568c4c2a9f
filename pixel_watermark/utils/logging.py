"""
Logging utilities
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _attach(
    logger: logging.Logger,
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Setup logging for an interactive run

    Stdout carries the prompts and the final message, so console records
    go to stderr. A log file, when given, receives the same records.
    """
    # Create formatter
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Reset root logger so repeated runs don't stack handlers
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # Console handler
    _attach(root_logger, logging.StreamHandler(sys.stderr), level, formatter)

    # File handler if specified
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(root_logger, logging.FileHandler(log_file), level, formatter)

    # PIL logs every PNG chunk at debug level
    logging.getLogger('PIL').setLevel(logging.WARNING)

    return root_logger
