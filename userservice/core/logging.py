"""
Logging setup shared by the console, the HTTP app and the service layer.

Modules grab a named logger with ``get_logger(__name__)``; entry points call
``configure_logging`` once. Output is a concise human format by default, or
one JSON object per line when ``json_logs`` is set.
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: str = "INFO", json_logs: bool = False, force: bool = True) -> None:
    """
    Configure the root logger.

    ``force`` replaces handlers installed by an earlier call; pass False to
    leave an existing configuration alone.
    """
    root = logging.getLogger()
    if not force and root.handlers:
        return
    level = (level or "INFO").upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if json_logs else "console",
                    "level": level,
                }
            },
            "root": {"handlers": ["default"], "level": level},
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter"]
