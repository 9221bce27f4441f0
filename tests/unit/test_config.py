"""
Unit tests for global configuration and logger setup.
"""

import logging

from ndcore import Config
from ndcore.utils.logging import get_logger, setup_logger


class TestConfig:
    """Tests for Config get/set/reset."""

    def test_defaults(self):
        assert Config.get("array.default_dtype") == "float64"
        assert Config.get("reshape.warn_on_size_mismatch") is True
        assert Config.get("display.max_elements") == 16

    def test_missing_key_returns_default(self):
        assert Config.get("array.missing", 5) == 5
        assert Config.get("array.default_dtype.deeper", "x") == "x"

    def test_set_creates_nested_keys(self):
        Config.set("custom.section.value", 3)
        assert Config.get("custom.section.value") == 3

    def test_reset(self):
        Config.set("display.max_elements", 2)
        Config.reset()
        assert Config.get("display.max_elements") == 16


class TestLogging:
    """Tests for logger helpers."""

    def test_get_logger_is_namespaced(self):
        assert get_logger("array").name == "ndcore.array"
        assert get_logger().name == "ndcore"

    def test_get_logger_attaches_no_handlers(self):
        logger = get_logger("tests.plain")
        assert logger.handlers == []
        assert logger.propagate
        assert logger.level == logging.NOTSET

    def test_package_logger_has_null_handler(self):
        package = logging.getLogger("ndcore")
        assert any(isinstance(h, logging.NullHandler) for h in package.handlers)

    def test_records_propagate_once(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ndcore.array"):
            get_logger("array").warning("once")
        assert [r.getMessage() for r in caplog.records].count("once") == 1

    def test_setup_logger_level_from_config(self):
        Config.set("logging.level", "DEBUG")
        assert setup_logger("ndcore.tests.level").level == logging.DEBUG

    def test_setup_logger_file(self, tmp_path):
        log_file = tmp_path / "logs" / "ndcore.log"
        logger = setup_logger("ndcore.tests.file", level=logging.INFO, log_file=log_file)
        logger.info("written")
        for handler in logger.handlers:
            handler.flush()
        assert "written" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()
