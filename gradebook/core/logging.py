"""Logging setup: JSON records in deployed environments, plain text locally."""

import logging
import sys
from pythonjsonlogger import jsonlogger

from gradebook.config import settings

QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["environment"] = settings.ENVIRONMENT
        log_record["app_name"] = settings.APP_NAME

        if hasattr(record, "correlation_id"):
            log_record["correlation_id"] = record.correlation_id


_configured = False


def _build_formatter() -> logging.Formatter:
    datefmt = "%Y-%m-%d %H:%M:%S"
    if settings.LOG_FORMAT == "json":
        return CustomJsonFormatter(fmt="%(asctime)s %(level)s %(name)s %(message)s", datefmt=datefmt)
    return logging.Formatter(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt=datefmt)


def setup_logging() -> None:
    """Attach a stdout handler to the root logger; later calls are no-ops."""
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
