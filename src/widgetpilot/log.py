"""
WidgetPilot Logging

Structured JSON logging for the API and CLI. Library code only creates
module loggers; handlers are attached here, under the "widgetpilot"
logger, by the entry points.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

# Record attributes copied into the JSON entry when a log call passes them in extra=
EXTRA_FIELDS = (
    "rule_id",
    "surface",
    "intent",
    "widget_type",
    "confidence_level",
    "policy_version",
    "request_id",
    "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", fmt: str = "json", stream=None) -> logging.Logger:
    """
    Attach a single stream handler to the "widgetpilot" logger.

    Calling it again replaces the handler rather than adding another.

    Args:
        level: Level name ("DEBUG", "INFO", ...)
        fmt: "json" for JSONFormatter, anything else for plain text
        stream: Output stream (default: stderr)
    """
    logger = logging.getLogger("widgetpilot")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for existing in list(logger.handlers):
        if getattr(existing, "_widgetpilot", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    handler._widgetpilot = True
    logger.addHandler(handler)
    return logger
