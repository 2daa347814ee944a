"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from scopescan.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Handlers installed on the scopescan logger."""

    def teardown_method(self):
        logger = logging.getLogger("scopescan")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True

    def test_levels(self):
        """Verbosity picks the console level."""
        for verbosity, level in [
            ("quiet", logging.ERROR),
            ("normal", logging.WARNING),
            ("verbose", logging.DEBUG),
        ]:
            logger = setup_logging(verbosity)
            (handler,) = logger.handlers
            assert isinstance(handler, RichHandler)
            assert handler.level == level

    def test_repeated_setup_replaces_handlers(self):
        """Calling setup twice leaves a single console handler."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Debug records reach the file even when the console is quieter."""
        log_file = tmp_path / "scan.log"
        setup_logging("normal", log_file=str(log_file))
        get_logger("checks.runner").debug("scanned 3 files")
        for handler in logging.getLogger("scopescan").handlers:
            handler.flush()
        assert "scopescan.checks.runner: scanned 3 files" in log_file.read_text()


class TestGetLogger:
    def test_namespacing(self):
        assert get_logger().name == "scopescan"
        assert get_logger("scopescan").name == "scopescan"
        assert get_logger("scopescan.cache").name == "scopescan.cache"
        assert get_logger("cache").name == "scopescan.cache"
