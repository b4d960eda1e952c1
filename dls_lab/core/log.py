"""
Logging helpers for dls_lab.

All modules log through named children of the "dls_lab" logger. Nothing is
printed until configure_logging() attaches a console handler.
"""

import logging
import sys
from typing import Optional, TextIO, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_NAME = "dls_lab"
_handler: Optional[logging.Handler] = None


def get_logger(name: str = _ROOT_NAME) -> logging.Logger:
    """
    Get a logger under the dls_lab namespace.

    Args:
        name: Logger name; module names such as "dls_lab.core.expander" are used as-is

    Returns:
        Logger instance
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = logging.INFO,
                      stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach (or replace) the console handler on the dls_lab logger.

    Args:
        level: Logging level, numeric or a name such as "DEBUG"
        stream: Output stream (default: sys.stdout)

    Returns:
        The configured root dls_lab logger
    """
    global _handler
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level!r}")

    logger = logging.getLogger(_ROOT_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stdout)
    _handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
