"""
Logging setup for the gcam-ports command line and demo.

The library only logs through module loggers under ``gcam_ports``; nothing
here runs on import. Live fetches go through requests/urllib3, whose
connection chatter is held at WARNING unless explicitly asked for, so
``-v`` shows the catalog and scraper debug lines on their own.
"""

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER = "gcam_ports"
HTTP_LOGGERS = ("urllib3", "requests")

BASIC_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s: %(message)s"


class CliLogHandler(logging.StreamHandler):
    """Stream handler installed by setup_logging (found again on re-setup)."""


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the -v/-q flags to a level; -v wins when both are given."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def _replace_handler(logger: logging.Logger, handler: Optional[logging.Handler]) -> None:
    for existing in [h for h in logger.handlers if isinstance(h, CliLogHandler)]:
        logger.removeHandler(existing)
    if handler is not None:
        logger.addHandler(handler)


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    show_http: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Send package logs to stderr (or ``stream``).

    Args:
        verbose: DEBUG level, with timestamps so request timing is visible
        quiet: WARNING level
        show_http: Also route urllib3/requests logs through the same handler
                   at the package level; otherwise they are capped at WARNING
        stream: Output stream (default: sys.stderr)

    Returns:
        The installed handler. Calling again replaces it rather than
        stacking a second one.
    """
    level = resolve_level(verbose, quiet)

    handler = CliLogHandler(stream if stream is not None else sys.stderr)
    if verbose:
        handler.setFormatter(logging.Formatter(VERBOSE_FORMAT, datefmt="%H:%M:%S"))
    else:
        handler.setFormatter(logging.Formatter(BASIC_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    _replace_handler(package_logger, handler)

    for name in HTTP_LOGGERS:
        http_logger = logging.getLogger(name)
        if show_http:
            http_logger.setLevel(level)
            _replace_handler(http_logger, handler)
        else:
            http_logger.setLevel(logging.WARNING)
            _replace_handler(http_logger, None)

    return handler
