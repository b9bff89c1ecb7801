"""Logger setup for the command line."""

import json
import logging
from datetime import UTC, datetime
from typing import Any

PLAIN_FORMAT = "%(levelname)s: %(message)s"

_STANDARD_LOGRECORD_KEYS: frozenset[str] = frozenset(
    logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None
    ).__dict__.keys()
)


class JSONFormatter(logging.Formatter):
    """JSON formatter with UTC ISO8601 timestamps."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        # fields passed via extra={}, e.g. line_number
        for key, value in vars(record).items():
            if key not in _STANDARD_LOGRECORD_KEYS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str, ensure_ascii=False)


def _setup_handler(logger: logging.Logger, level: int, json_format: bool) -> None:
    """Attach a single stderr handler to the logger.

    Args:
        logger: The logger to configure.
        level: The logging level to set.
        json_format: Emit one JSON object per record instead of plain text.
    """
    formatter = JSONFormatter() if json_format else logging.Formatter(PLAIN_FORMAT)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    logger.setLevel(level)
    logger.propagate = False


def get_logger(
    name: str = "contacts_csv", level: int = logging.INFO, json_format: bool = False
) -> logging.Logger:
    """Get the package logger configured for console output.

    Args:
        name: The logger name. Defaults to "contacts_csv".
        level: The logging level to set. Defaults to logging.INFO.
        json_format: Use JSONFormatter instead of the plain format.
    """
    logger = logging.getLogger(name)
    _setup_handler(logger, level, json_format)
    return logger
