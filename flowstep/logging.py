"""Package logger for flowstep.

Modules log through ``get_logger(__name__)``, so every record passes through
the ``flowstep`` logger, which owns the single stderr handler. Standard output
is left to the CLI's tables and listings. The CLI picks the level with
``set_global_log_level`` (``--verbose`` for DEBUG, ``--quiet`` for WARNING).
"""

import logging
import sys

ROOT_LOGGER_NAME = "flowstep"

DEFAULT_LEVEL = logging.INFO
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _package_logger() -> logging.Logger:
    """Return the ``flowstep`` logger, attaching its handler on first use."""
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(DEFAULT_LEVEL)
        # Propagate so pytest's caplog sees our records
        package_logger.propagate = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger under the package logger.

    Args:
        name: Module name, normally ``__name__``.
    """
    _package_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handler."""
    package_logger = _package_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)
