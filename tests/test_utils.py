"""Tests for logging setup and worker sizing"""
import logging
import sys
from unittest.mock import patch

import pytest

from git_extend.logging_config import ColoredFormatter, get_logger, setup_logging
from git_extend.utils.threading import get_optimal_worker_count, is_free_threading_enabled


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    handlers = logger.handlers[:]
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLogging:
    """Test logging configuration."""

    def test_get_logger_strips_package_prefix(self):
        assert get_logger("git_extend.services.git_service").name == "git_service"
        assert get_logger("git_extend.core").name == "core"
        assert get_logger("other.module").name == "other.module"

    def test_default_level_is_warning(self, root_logger):
        setup_logging()
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1

    def test_verbose_level(self, root_logger):
        setup_logging(verbose=True)
        assert root_logger.level == logging.INFO

    def test_debug_writes_log_file(self, root_logger, temp_dir):
        log_file = temp_dir / "logs" / "git-list.log"
        with patch("git_extend.logging_config.get_log_file", return_value=log_file):
            setup_logging(debug=True)
            get_logger("git_extend.core").debug("hello from the test")
            for handler in root_logger.handlers:
                handler.flush()

        assert root_logger.level == logging.DEBUG
        assert "hello from the test" in log_file.read_text()
        for handler in root_logger.handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()

    def test_colored_formatter_plain_when_not_a_tty(self):
        record = logging.LogRecord("core", logging.ERROR, __file__, 1, "boom", None, None)
        with patch("git_extend.logging_config.sys") as mock_sys:
            mock_sys.stderr.isatty.return_value = False
            assert ColoredFormatter(fmt="%(levelname)s %(message)s").format(record) == "ERROR boom"


class TestWorkerCount:
    """Test thread pool sizing."""

    def test_user_specified(self):
        assert get_optimal_worker_count(3) == 3

    def test_auto_detect_is_positive(self):
        assert get_optimal_worker_count() >= 1

    def test_gil_build(self):
        with patch("git_extend.utils.threading.is_free_threading_enabled", return_value=False), \
                patch("git_extend.utils.threading.os.cpu_count", return_value=20):
            assert get_optimal_worker_count() == 24

    def test_free_threading_build(self):
        with patch("git_extend.utils.threading.is_free_threading_enabled", return_value=True), \
                patch("git_extend.utils.threading.os.cpu_count", return_value=20):
            assert get_optimal_worker_count() == 40

    def test_free_threading_detection(self):
        with patch.object(sys, "_is_gil_enabled", create=True, return_value=False):
            assert is_free_threading_enabled() is True
        with patch.object(sys, "_is_gil_enabled", create=True, return_value=True):
            assert is_free_threading_enabled() is False
