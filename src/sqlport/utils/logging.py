"""Logging helpers for sqlport.

Records emitted by dialects carry the backend name in ``extra``; the handler
installed here prints it next to the logger name.
"""

from __future__ import annotations

import logging

NO_DIALECT = "-"


class DialectNameFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "dialect", None):
            record.dialect = NO_DIALECT
        return True


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger("sqlport")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(dialect)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(DialectNameFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"sqlport.{name}")
