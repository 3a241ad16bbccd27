import json
import logging

from powerstat_core.obs.logging import JsonFormatter, get_logger


def test_json_formatter_includes_structured_fields():
    record = logging.LogRecord("powerstat.runner", logging.DEBUG, __file__, 1, "timed out", None, None)
    record.command = ["pmset", "-g", "batt"]
    record.error_code = "timeout"
    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "debug"
    assert payload["logger"] == "powerstat.runner"
    assert payload["msg"] == "timed out"
    assert payload["command"] == ["pmset", "-g", "batt"]
    assert payload["error_code"] == "timeout"
    assert "ts" in payload


def test_get_logger_attaches_single_handler():
    logger = get_logger("powerstat.test_logging")
    again = get_logger("powerstat.test_logging", level="debug")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
