"""
Structured logging for the Intacct client.

Library modules log through ``logger`` (or children of ``intacct``) and never
attach handlers. Applications call ``configure_logging()`` once to get
console output, JSON when USE_JSON_LOGS=true.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Dict, Any, Optional, IO
import os

logger = logging.getLogger("intacct")
logger.addHandler(logging.NullHandler())


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


def configure_logging(level: Optional[str] = None, stream: IO[str] = sys.stdout) -> None:
    """Attach a single console handler to the ``intacct`` logger."""
    level_name = (level or os.getenv("INTACCT_LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(numeric_level)

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(numeric_level)

    if os.getenv("USE_JSON_LOGS", "false").lower() == "true":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    logger.propagate = False


def log_request(
    method: str,
    endpoint: str,
    status_code: int,
    duration_ms: float,
    control_id: Optional[str] = None,
    **kwargs
):
    """Log one gateway round trip."""
    extra_fields = {
        "type": "gateway_request",
        "method": method,
        "endpoint": endpoint,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if control_id:
        extra_fields["control_id"] = control_id
    extra_fields.update(kwargs)

    logger.info(f"{method} {endpoint} {status_code}", extra={"extra_fields": extra_fields})


def log_error(
    error_type: str,
    message: str,
    context: Optional[Dict[str, Any]] = None,
    exception: Optional[Exception] = None
):
    """Log error with context."""
    extra_fields = {
        "type": "error",
        "error_type": error_type,
    }
    if context:
        extra_fields.update(context)

    if exception:
        logger.error(message, exc_info=exception, extra={"extra_fields": extra_fields})
    else:
        logger.error(message, extra={"extra_fields": extra_fields})
