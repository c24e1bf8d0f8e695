"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import sys
from datetime import date
from decimal import Decimal

import pytest

from ledgerbalance.config import TestConfig
from ledgerbalance.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def reset_package_logger():
    """Detach handlers installed by ``setup_logging`` after each test."""

    yield
    root_logger = logging.getLogger("ledgerbalance")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)


def _record(level=logging.INFO, msg="Test message", exc_info=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.module = "test_module"
    record.funcName = "test_function"
    return record


def test_json_formatter():
    """JSONFormatter emits the standard keys."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    """JSONFormatter serializes exception details."""
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(logging.ERROR, "Error occurred", exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_serializes_money_and_dates_in_extra():
    record = _record()
    record.owner_id = 3
    record.amount = Decimal("12.50")
    record.month = date(2025, 4, 1)

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"owner_id": 3, "amount": "12.50", "month": "2025-04-01"}


def test_json_formatter_skips_console_timestamp():
    """A record already formatted by the console handler carries no asctime extra."""
    record = _record()
    logging.Formatter("%(asctime)s %(message)s").format(record)

    log_data = json.loads(JSONFormatter().format(record))

    assert hasattr(record, "asctime")
    assert "extra" not in log_data

def test_setup_logging(tmp_path, ledger_config, reset_package_logger):
    """Logging setup creates a rotating JSON log file under DATA_DIR."""
    config = ledger_config
    config.DATA_DIR = str(tmp_path)
    config.DEV_MODE = True

    logger = setup_logging(config)

    assert logger.name == "ledgerbalance"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "ledgerbalance.log"
    assert log_file.exists()

    get_logger("services.engine").warning("Rejected ledger request", extra={"owner_id": 1})
    for handler in logger.handlers:
        handler.flush()

    entries = [json.loads(line) for line in log_file.read_text().splitlines() if line.strip()]

    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["logger"] == "ledgerbalance.services.engine"
    assert entries[-1]["extra"] == {"owner_id": 1}


def test_setup_logging_is_idempotent(tmp_path, ledger_config, reset_package_logger):
    config = ledger_config
    config.DATA_DIR = str(tmp_path)

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


@pytest.mark.parametrize("dev_mode, console_level", [(True, logging.INFO), (False, logging.WARNING)])
def test_console_level_follows_dev_mode(
    tmp_path, ledger_config, reset_package_logger, dev_mode, console_level
):
    config = ledger_config
    config.DATA_DIR = str(tmp_path)
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console = next(h for h in logger.handlers if not isinstance(h, logging.FileHandler))
    assert console.level == console_level


def test_log_level_from_environment(tmp_path, monkeypatch, reset_package_logger):
    monkeypatch.setenv("LEDGERBALANCE_LOG_LEVEL", "debug")
    config = TestConfig()
    config.DATA_DIR = str(tmp_path)

    logger = setup_logging(config)

    assert logger.level == logging.DEBUG


def test_get_logger():
    """get_logger namespaces under the package logger."""
    logger = get_logger("test_module")

    assert logger.name == "ledgerbalance.test_module"
    assert isinstance(logger, logging.Logger)
