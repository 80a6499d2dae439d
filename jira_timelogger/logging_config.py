# jira_timelogger/logging_config.py
"""
Stderr-only JSON logging configuration.

The CLI prints results to stdout, so all logging goes to stderr.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON line."""
        log_data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            log_data["exc"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure logging to output JSON to stderr only.

    Clears existing handlers so repeated CLI invocations don't double up.

    Args:
        level: Root log level (default INFO)
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # httpx logs every request at INFO
    for logger_name in ["httpx", "httpcore"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(max(level, logging.WARNING))
