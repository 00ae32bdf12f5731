"""Tests for gcam_ports/common/log_config.py"""

import io
import logging
import sys

import pytest

from gcam_ports.common.log_config import (
    HTTP_LOGGERS,
    PACKAGE_LOGGER,
    CliLogHandler,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_loggers():
    """Undo handlers and levels set by setup_logging."""
    yield
    for name in (PACKAGE_LOGGER,) + HTTP_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers = [h for h in logger.handlers if not isinstance(h, CliLogHandler)]
        logger.setLevel(logging.NOTSET)


class TestResolveLevel:
    @pytest.mark.parametrize("verbose,quiet,expected", [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ])
    def test_levels(self, verbose, quiet, expected):
        assert resolve_level(verbose, quiet) == expected


class TestSetupLogging:
    def test_defaults_to_stderr_at_info(self):
        handler = setup_logging()
        logger = logging.getLogger(PACKAGE_LOGGER)
        assert logger.level == logging.INFO
        assert handler.stream is sys.stderr
        assert handler in logger.handlers

    def test_repeated_calls_replace_handler(self):
        first = setup_logging()
        second = setup_logging(verbose=True)
        handlers = [h for h in logging.getLogger(PACKAGE_LOGGER).handlers if isinstance(h, CliLogHandler)]
        assert handlers == [second]
        assert first not in handlers

    def test_verbose_lines_have_timestamps(self):
        stream = io.StringIO()
        setup_logging(verbose=True, stream=stream)

        logging.getLogger("gcam_ports.live.fetcher").debug("Kept %d links", 3)

        line = stream.getvalue().strip()
        assert line.endswith("DEBUG    gcam_ports.live.fetcher: Kept 3 links")
        assert line[2] == ":"  # HH:MM:SS prefix

    def test_basic_format_without_timestamp(self):
        stream = io.StringIO()
        setup_logging(stream=stream)

        logging.getLogger("gcam_ports.catalog").info("Loaded")

        assert stream.getvalue() == "INFO     gcam_ports.catalog: Loaded\n"

    def test_http_chatter_held_at_warning_under_verbose(self):
        stream = io.StringIO()
        setup_logging(verbose=True, stream=stream)

        logging.getLogger("urllib3.connectionpool").debug("Starting new HTTPS connection")

        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        assert "Starting new HTTPS connection" not in stream.getvalue()

    def test_show_http_routes_urllib3(self):
        stream = io.StringIO()
        handler = setup_logging(verbose=True, show_http=True, stream=stream)

        logging.getLogger("urllib3.connectionpool").debug("Starting new HTTPS connection")

        assert logging.getLogger("urllib3").level == logging.DEBUG
        assert handler in logging.getLogger("urllib3").handlers
        assert "urllib3.connectionpool: Starting new HTTPS connection" in stream.getvalue()

    def test_show_http_turned_off_again(self):
        setup_logging(show_http=True)
        setup_logging()
        urllib3_logger = logging.getLogger("urllib3")
        assert not [h for h in urllib3_logger.handlers if isinstance(h, CliLogHandler)]
        assert urllib3_logger.level == logging.WARNING
