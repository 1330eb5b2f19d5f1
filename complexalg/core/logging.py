"""
Debug logging for the algebra functions.

Library code logs through an OperationLogger, naming the operation and the
case it dispatched to:

    logger = get_operation_logger(__name__)
    logger.debug("Quadratic general case", operation="solve_quadratic_equation", path="real")

Nothing is emitted until the host application calls setup_logging().
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, MutableMapping, Optional

from .config import Settings, settings as default_settings

# Keyword arguments understood by Logger._log; anything else is a record detail
_LOG_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


class OperationLogger(logging.LoggerAdapter):
    """Logger adapter storing the operation and its details on each record"""

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple:
        details = {key: kwargs.pop(key) for key in list(kwargs) if key not in _LOG_KWARGS}
        extra = kwargs.setdefault("extra", {})
        extra["operation"] = details.pop("operation", None)
        extra["details"] = details
        return msg, kwargs


def get_operation_logger(name: str) -> OperationLogger:
    return OperationLogger(logging.getLogger(name), {})


class OperationFormatter(logging.Formatter):
    """
    Render operation records as JSON lines or as text.

    JSON:  {"time": ..., "level": "DEBUG", "operation": "sum_all", "message": ..., "count": 3}
    Text:  2024-01-01T12:00:00 DEBUG complexalg.math.algebra [sum_all] Summed complex numbers count=3
    """

    def __init__(self, as_json: bool = False):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S")
        self.as_json = as_json

    def format(self, record: logging.LogRecord) -> str:
        operation = getattr(record, "operation", None)
        details = getattr(record, "details", {})
        timestamp = self.formatTime(record, self.datefmt)

        if self.as_json:
            data = {
                "time": timestamp,
                "level": record.levelname,
                "logger": record.name,
                "operation": operation,
                "message": record.getMessage(),
                **details,
            }
            if record.exc_info:
                data["exception"] = self.formatException(record.exc_info)
            return json.dumps(data, default=str)

        parts = [timestamp, record.levelname, record.name]
        if operation:
            parts.append(f"[{operation}]")
        parts.append(record.getMessage())
        parts.extend(f"{key}={value}" for key, value in details.items())
        text = " ".join(parts)
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        return text


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Send complexalg records to stderr, and to LOG_FILE when configured.

    Only the "complexalg" logger is touched; calling this again replaces the
    handlers it installed before.
    """
    settings = settings or default_settings
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
    formatter = OperationFormatter(as_json=settings.LOG_FORMAT == "json")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    package_logger = logging.getLogger("complexalg")
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        package_logger.addHandler(handler)
    package_logger.setLevel(log_level)

    return package_logger
