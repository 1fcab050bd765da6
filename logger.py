"""
Logging configuration for LinguaBridge.

Log lines from the translation path carry request context (provider,
language pair, fallback strategy, failure reason) passed through
``extra=``. The JSON formatter emits those as top-level keys; the plain
formatter appends them as ``key=value`` pairs.
"""

import logging
import logging.handlers
import json
import sys
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import os

ROOT_LOGGER = "linguabridge"

# Attributes set via extra= by translator, fallback and remote resolvers
CONTEXT_FIELDS = ("provider", "source_lang", "target_lang", "strategy", "reason")


def translation_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping, dropping unset fields."""
    return {k: v for k, v in fields.items() if k in CONTEXT_FIELDS and v is not None}


def _context_of(record: logging.LogRecord) -> Dict[str, Any]:
    return {name: getattr(record, name) for name in CONTEXT_FIELDS if hasattr(record, name)}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, translation context included."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(_context_of(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class ContextFormatter(logging.Formatter):
    """Plain text formatter with trailing key=value context."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context_of(record)
        if context:
            line += " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"
        return line


def setup_logging(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    console_output: bool = True,
    json_format: bool = False
) -> logging.Logger:
    """
    Set up logging for the service.

    Args:
        log_file: Path to a rotating log file (optional)
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        console_output: Log to stderr (stdout is reserved for CLI output)
        json_format: Emit JSON lines instead of plain text

    Returns:
        The service root logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = ContextFormatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get ``linguabridge`` or a ``linguabridge.<name>`` child logger."""
    if name:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logging.getLogger(ROOT_LOGGER)
