"""Logging setup for applications emitting splinter logs.

Splinter events are passed straight to a logger; ``logging`` renders them
through ``str()`` only when the record is actually emitted::

    logger = get_logger(__name__)
    logger.info(CallLog("Coffee Time", "pumpWater"))
"""

import json
import logging
import logging.config
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path

from .config import SplinterSettings
from .events import BaseLog


class JSONFormatter(logging.Formatter):
    """JSON formatter keeping the splinter line intact in ``message``."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Index splinter logs by task
        if isinstance(record.msg, BaseLog):
            log_data["task"] = record.msg.task

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    log_level: str = "INFO",
    log_file: str | None = None,
    json_format: bool = False,
) -> None:
    """
    Setup logging for the application.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Path to a rotating log file. Console only when None.
        json_format: Emit JSON records instead of plain text.
    """
    formatter = "json" if json_format else "plain"
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": formatter,
            "stream": "ext://sys.stdout",
        },
    }

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "formatter": formatter,
            "encoding": "utf-8",
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
            "json": {
                "()": JSONFormatter,
            },
        },
        "handlers": handlers,
        "root": {
            "level": log_level.upper(),
            "handlers": list(handlers),
        },
    }

    logging.config.dictConfig(logging_config)


def setup_logging_from_settings(settings: SplinterSettings) -> None:
    """Setup logging with values loaded by ``config.load_settings``."""
    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_format=settings.json_logs,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
