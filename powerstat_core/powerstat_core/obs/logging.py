from __future__ import annotations
import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

# Structured fields copied from LoggerAdapter/extra onto the JSON payload
STRUCTURED_FIELDS = ("probe", "command", "duration_ms", "error_code", "platform", "ttl", "tags")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in STRUCTURED_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def get_logger(name: str = "powerstat", level: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger, attaching a JSON stream handler on first use.

    Child loggers ("powerstat.battery", ...) propagate to it and need no
    handler of their own.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(logging.INFO)
    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
