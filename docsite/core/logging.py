from __future__ import annotations

import json
import logging
import logging.config
from pathlib import Path


class JsonFormatter(logging.Formatter):
    """Single-line JSON records for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        step = getattr(record, "step", None)
        if step:
            payload["step"] = step
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


_configured = False


def configure_logging(settings=None) -> None:
    """Configure process logging once; later calls are no-ops."""

    global _configured
    if _configured:
        return

    if settings is None:
        from docsite.core.settings import get_settings

        settings = get_settings()

    log_level = getattr(settings, "log_level", "INFO") or "INFO"
    formatter_name = "json" if getattr(settings, "log_json", False) else "standard"

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": formatter_name,
        },
    }
    log_file_value = getattr(settings, "log_file", "") or ""
    if log_file_value:
        log_file = Path(log_file_value)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": "json",
            "filename": str(log_file),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 5,
            "encoding": "utf-8",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                },
                "json": {
                    "()": "docsite.core.logging.JsonFormatter",
                },
            },
            "handlers": handlers,
            "root": {
                "level": log_level,
                "handlers": list(handlers),
            },
        }
    )
    logging.captureWarnings(True)
    _configured = True


def reset_logging() -> None:
    """Allow configure_logging() to run again (used by tests)."""
    global _configured
    _configured = False


__all__ = ["JsonFormatter", "configure_logging", "reset_logging"]
