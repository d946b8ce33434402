"""
Logging setup for the article report pipeline.

All modules log under the ``article_report`` logger. The console gets a
rich handler on stderr; an optional file handler writes one JSON object per
line, carrying the structured fields passed through ``log_event``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig


LOGGER_NAME = "article_report"

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(cfg: LoggingConfig) -> logging.Logger:
    level = parse_level(cfg.level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers = []
    logger.propagate = False

    handlers: list[logging.Handler] = []
    if cfg.console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=False,
            show_level=True,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if cfg.file and cfg.directory:
        log_dir = Path(cfg.directory)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / cfg.filename, encoding="utf-8")
        file_handler.setFormatter(
            JsonlFormatter() if cfg.format == "jsonl" else logging.Formatter(_PLAIN_FORMAT)
        )
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def parse_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def log_event(
    logger: logging.Logger | None,
    message: str,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Log ``message`` with ``fields`` attached to the record as attributes."""
    if logger is not None:
        logger.log(level, message, extra=fields)


def truncate_text(text: str, max_chars: int = 20000, marker: str = "...(truncated)") -> str:
    return text if len(text) <= max_chars else f"{text[:max_chars]}{marker}"


class JsonlFormatter(logging.Formatter):
    """Formats each record as a single JSON line including its extra fields."""

    standard_attrs = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message"}

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in self.standard_attrs:
                payload[key] = value
        return json.dumps(payload, ensure_ascii=True, default=str)
