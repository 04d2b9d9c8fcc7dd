"""Tests for logging setup."""

import logging

from codeown.logging_config import get_logger, setup_logging


class TestGetLogger:
    def test_root_logger(self):
        assert get_logger().name == "codeown"

    def test_prefixes_foreign_names(self):
        assert get_logger("history").name == "codeown.history"

    def test_keeps_package_names(self):
        assert get_logger("codeown.api").name == "codeown.api"


class TestSetupLogging:
    def test_default_level_is_warning(self):
        assert setup_logging().level == logging.WARNING

    def test_verbose_and_quiet(self):
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(quiet=True).level == logging.ERROR

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "codeown.log"
        logger = setup_logging(log_file=str(log_file))
        logger.warning("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
