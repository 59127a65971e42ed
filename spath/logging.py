"""Logging for the spath package.

Every module logs through a child of the ``spath`` logger obtained with
:func:`get_logger`. Importing the package installs nothing but a
``NullHandler``, so records only reach the application's own logging setup.
Output is opt-in: :func:`setup_root_logger` attaches one handler to the
``spath`` logger, and :func:`enable_debug_logging` does so on demand before
lowering the level to DEBUG.

Example:
    >>> from spath.logging import enable_debug_logging
    >>> enable_debug_logging()  # engine traces now go to stdout
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "spath"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler attached by setup_root_logger(); None while output is off.
_handler: Optional[logging.Handler] = None


def _package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, normally a module ``__name__``.

    Loggers below ``spath`` carry no level of their own; they follow the
    package logger.
    """
    return logging.getLogger(name)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """Send ``spath`` records to ``handler`` (stdout by default).

    Only the first call installs a handler; later calls return it unchanged
    until :func:`reset_logging` removes it.

    Args:
        level: Level of the package logger and the handler.
        format_string: Record format; a timestamped default if None.
        handler: Destination; a ``StreamHandler`` on stdout if None.

    Returns:
        The installed handler.
    """
    global _handler

    if _handler is not None:
        return _handler

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler.setLevel(level)

    package_logger = _package_logger()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    _handler = handler
    return handler


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its installed handler."""
    _package_logger().setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)


def enable_debug_logging() -> None:
    """Print DEBUG traces of every engine, installing the handler if needed."""
    setup_root_logger(level=logging.DEBUG)
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Go back to INFO; the installed handler, if any, stays."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Remove the installed handler and the package level (mainly for testing)."""
    global _handler

    package_logger = _package_logger()
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None
    package_logger.setLevel(logging.NOTSET)


_package_logger().addHandler(logging.NullHandler())
