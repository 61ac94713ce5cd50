"""
Logging Configuration
Console (and optional file) output for one logger namespace.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  namespace: str = __package__) -> logging.Logger:
    """
    Attach handlers to the logger for `namespace` and return it.

    Every module logger below the namespace (e.g. ``xenvox.osc.dispatcher``)
    propagates into these handlers. Calling again replaces the handlers,
    so the level and log file can be changed at runtime.

    Args:
        level: Logging level for the logger and its handlers
        log_file: Optional path; the file is truncated on setup
        namespace: Root of the logger tree to configure
    """
    logger = logging.getLogger(namespace)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized for %r (level %s)", namespace, logging.getLevelName(level))
    return logger
