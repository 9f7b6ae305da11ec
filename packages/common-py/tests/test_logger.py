"""
Tests for the logger module
"""

import json
import logging

from bxkit_common.logger import BxkitLogger, JsonFormatter, configure_logging, get_logger


def _last_record(capsys) -> dict:
    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    return json.loads(lines[-1])


class TestLogger:
    """Test BxkitLogger"""

    def test_get_logger(self):
        """Test get_logger creates a logger"""
        logger = get_logger("bxkit_test.service")
        assert isinstance(logger, BxkitLogger)
        assert logger.service_name == "bxkit_test.service"
        assert logger.context == {}

    def test_logger_with_log_level(self):
        """Test logger with custom log level"""
        get_logger("bxkit_test.level", log_level="DEBUG")
        assert logging.getLogger("bxkit_test.level").level == logging.DEBUG

    def test_info_is_json_on_stderr(self, capsys):
        """Records are single JSON objects written to stderr"""
        logger = get_logger("bxkit_test.json", log_level="INFO")
        logger.info("Resolved secret", secret_id="FOO")

        captured_out = capsys.readouterr()
        assert captured_out.out == ""
        record = json.loads(captured_out.err.splitlines()[-1])
        assert record["message"] == "Resolved secret"
        assert record["level"] == "INFO"
        assert record["service"] == "bxkit_test.json"
        assert record["secret_id"] == "FOO"
        assert "timestamp" in record

    def test_extra_fields_are_merged(self, capsys):
        """Test the extra= keyword is flattened into the record"""
        logger = get_logger("bxkit_test.extra", log_level="INFO")
        logger.warning("Skipped line", extra={"line": 3})

        record = _last_record(capsys)
        assert record["line"] == 3
        assert record["level"] == "WARNING"

    def test_debug_filtered_at_info(self, capsys):
        """Test records below the level are dropped"""
        logger = get_logger("bxkit_test.filtered", log_level="INFO")
        logger.debug("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_warn_alias_and_levels(self, capsys):
        """Test every level method emits"""
        logger = get_logger("bxkit_test.levels", log_level="DEBUG")
        logger.debug("d")
        logger.warn("w")
        logger.error("e")
        logger.critical("c")

        levels = [json.loads(line)["level"] for line in capsys.readouterr().err.splitlines() if line.strip()]
        assert levels == ["DEBUG", "WARNING", "ERROR", "CRITICAL"]

    def test_exception_includes_traceback(self, capsys):
        logger = get_logger("bxkit_test.exc", log_level="INFO")
        try:
            raise ValueError("bad value")
        except ValueError:
            logger.exception("Failed")

        record = _last_record(capsys)
        assert "ValueError: bad value" in record["exception"]

    def test_logger_with_context(self):
        """Test logger with context"""
        logger = get_logger("bxkit_test.ctx")
        logger_with_ctx = logger.with_context(builder="mybuilder", node="mybuilder0")

        assert logger_with_ctx.context == {"builder": "mybuilder", "node": "mybuilder0"}
        # Original logger unchanged
        assert logger.context == {}

    def test_logger_context_chaining(self):
        """Test chaining context"""
        logger = get_logger("bxkit_test.chain")
        logger1 = logger.with_context(key1="value1")
        logger2 = logger1.with_context(key2="value2")

        assert logger1.context == {"key1": "value1"}
        assert logger2.context == {"key1": "value1", "key2": "value2"}
        assert logger.context == {}

    def test_context_in_output(self, capsys):
        logger = get_logger("bxkit_test.ctxout", log_level="INFO").with_context(builder="b1")
        logger.info("Inspected")

        assert _last_record(capsys)["builder"] == "b1"

    def test_single_handler_per_package(self):
        """Test repeated get_logger calls do not stack handlers"""
        get_logger("bxkit_test.dup.a")
        get_logger("bxkit_test.dup.b")
        get_logger("bxkit_test.dup.a")

        handlers = [h for h in logging.getLogger("bxkit_test").handlers if isinstance(h.formatter, JsonFormatter)]
        assert len(handlers) == 1

    def test_configure_logging(self):
        """Test configure_logging"""
        logger = configure_logging("bxkit_test_service", log_level="WARNING")
        assert logger.service_name == "bxkit_test_service"
        assert logging.getLogger("bxkit_sdk").level == logging.WARNING
        configure_logging("bxkit_test_service", log_level="INFO")

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("BXKIT_LOG_LEVEL", "ERROR")
        configure_logging("bxkit_test_env")

        assert logging.getLogger("bxkit_test_env").level == logging.ERROR
        configure_logging("bxkit_test_env", log_level="INFO")
