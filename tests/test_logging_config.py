"""
Tests for structured logging
"""

import io
import sys
import json
import logging

import pytest

from bank_account.logging_config import JSONFormatter, get_logger, log_action, setup_logging


@pytest.fixture
def captured_logger():
    """JSON logger writing to an in-memory stream"""
    logger = setup_logging(level="DEBUG", logger_name="bank_account.test", log_format="json")
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)
    yield logger, stream
    logger.handlers.clear()


class TestJSONFormatter:
    """Test JSON log lines"""

    def test_basic_fields(self):
        """Test that level, module and message are present and None fields are dropped"""
        record = logging.LogRecord("bank_account.ledger", logging.INFO, __file__, 1,
                                   "Recorded %s", ("entry",), None)

        line = json.loads(JSONFormatter().format(record))

        assert line["level"] == "INFO"
        assert line["module"] == "bank_account.ledger"
        assert line["message"] == "Recorded entry"
        assert "timestamp" in line
        assert "account_id" not in line

    def test_exception_info(self):
        """Test that exceptions are rendered"""
        try:
            raise ValueError("bad amount")
        except ValueError:
            record = logging.LogRecord("bank_account", logging.ERROR, __file__, 1,
                                       "failed", (), sys.exc_info())

        line = json.loads(JSONFormatter().format(record))

        assert "ValueError: bad amount" in line["exception"]


class TestLogAction:
    """Test structured action logging"""

    def test_structured_fields(self, captured_logger):
        """Test that account, action and extra data reach the log line"""
        logger, stream = captured_logger

        log_action(logger, "info", "Deposit recorded", account_id="ACC001",
                   action="deposit", correlation_id="req-1", extra={"amount": 100})

        line = json.loads(stream.getvalue().strip())
        assert line["message"] == "Deposit recorded"
        assert line["account_id"] == "ACC001"
        assert line["action"] == "deposit"
        assert line["correlation_id"] == "req-1"
        assert line["extra"] == {"amount": 100}

    def test_respects_level(self, captured_logger):
        """Test that records below the logger level are dropped"""
        logger, stream = captured_logger
        logger.setLevel(logging.WARNING)

        log_action(logger, "info", "ignored")

        assert stream.getvalue() == ""


class TestSetupLogging:
    """Test logger setup"""

    def test_text_format(self):
        """Test the plain text formatter"""
        logger = setup_logging(level="INFO", logger_name="bank_account.text", log_format="text")
        try:
            assert len(logger.handlers) == 1
            assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
            assert logger.level == logging.INFO
            assert logger.propagate is False
        finally:
            logger.handlers.clear()

    def test_setup_is_idempotent(self):
        """Test that repeated setup does not duplicate handlers"""
        setup_logging(level="INFO", logger_name="bank_account.twice")
        logger = setup_logging(level="INFO", logger_name="bank_account.twice")
        try:
            assert len(logger.handlers) == 1
        finally:
            logger.handlers.clear()

    def test_get_logger(self):
        """Test logger lookup by name"""
        assert get_logger("bank_account.ledger") is logging.getLogger("bank_account.ledger")
