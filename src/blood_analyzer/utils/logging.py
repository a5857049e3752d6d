# ============================================================================
# src/blood_analyzer/utils/logging.py
# ============================================================================
"""
Logging for the blood report analyzer.

Session-scoped components log through SessionLogAdapter, which prefixes the
message with the session and attaches session_id (and extraction_id, when
known) to the record. JsonFormatter emits those attributes as fields, so one
user's upload can be followed through a JSON log.
"""

import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import logging_settings

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
PLAIN_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Record attributes copied into JSON output when present
SESSION_FIELDS = ('session_id', 'extraction_id')


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'line': record.lineno,
        }

        for field in SESSION_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False)


class SessionLogAdapter(logging.LoggerAdapter):
    """
    Logger bound to one session.

    Example:
        log = SessionLogAdapter(logger, session_id="abc")
        log.info("extraction stored")   # "Session abc: extraction stored"
    """

    def __init__(self, logger: logging.Logger, session_id: str, **fields: Any):
        super().__init__(logger, {'session_id': session_id, **fields})

    def process(self, msg, kwargs):
        kwargs['extra'] = {**self.extra, **kwargs.get('extra', {})}
        return f"Session {self.extra['session_id']}: {msg}", kwargs


def _handlers(log_file: Optional[Path], formatter: logging.Formatter) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_json: Optional[bool] = None
) -> None:
    """
    Configure the root logger.

    Arguments left as None come from ``logging_settings`` (LOG_LEVEL,
    LOG_FILE, LOG_FORMAT_JSON).
    """
    level = (level or logging_settings.LOG_LEVEL).upper()
    if format_json is None:
        format_json = logging_settings.LOG_FORMAT_JSON

    formatter = (
        JsonFormatter() if format_json
        else logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT)
    )

    logging.basicConfig(
        level=getattr(logging, level),
        handlers=_handlers(log_file or logging_settings.LOG_FILE, formatter),
        force=True
    )


def log_performance(logger: logging.Logger, operation: str):
    """Decorator logging how long a synchronous call took, and failures."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{operation} failed after {time.perf_counter() - started:.3f}s: {e}")
                raise
            logger.info(f"{operation} completed in {time.perf_counter() - started:.3f}s")
            return result
        return wrapper
    return decorator
