"""Root logger setup: human-readable lines in development, JSON lines in production."""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": "cadenza",
        }

        for field in ("request_id", "user_id", "path"):
            if hasattr(record, field):
                log_record[field] = getattr(record, field)

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def configure_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    Configure the root logger once.

    Safe to call multiple times (each test builds its own app); later calls
    only adjust the level.
    """
    global _LOGGING_CONFIGURED

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)

    _LOGGING_CONFIGURED = True
    logging.getLogger(__name__).info("Logging initialized with level %s", level)
