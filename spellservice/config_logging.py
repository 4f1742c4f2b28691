"""
Spell Service Logging & Errors
==============================
Structured logging and the error taxonomy shared by all spell service modules.

Every spell check request gets a short request id; all records logged while
the request runs (cache lookup, pool wait, dictionary lookup) carry it, so the
lines of one word can be told apart when sessions check words concurrently.

Nothing raised from here is fatal to a session caller: the session pipeline
catches every SpellServiceError (and any other exception) and degrades to an
empty "not in dictionary" result.
"""

import sys
import json
import logging
import uuid
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional, Dict, Any
from pathlib import Path

from .config import LoggingConfig, get_config

__version__ = "1.0.0"

LOG_FILE_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUP_COUNT = 3

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRIBUTES = frozenset(logging.LogRecord('', 0, '', 0, '', (), None).__dict__) | {
    'message', 'asctime', 'taskName',
}

_request = threading.local()


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def current_request_id() -> Optional[str]:
    """Request id of the spell check running on this thread, if any."""
    return getattr(_request, 'request_id', None)


@contextmanager
def request_scope(request_id: Optional[str] = None) -> Iterator[str]:
    """
    Tag every record logged on this thread with a request id.

    Scopes nest; the outer id is restored on exit.
    """
    previous = current_request_id()
    _request.request_id = request_id or uuid.uuid4().hex[:10]
    try:
        yield _request.request_id
    finally:
        _request.request_id = previous


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

class StructuredLogger:
    """Structured logger: keyword context goes into the JSON document and onto the record."""

    def __init__(self, name: str, config: Optional[LoggingConfig] = None):
        self.name = name
        self.config = config or get_config().logging
        self.logger = logging.getLogger(name)
        self._configure()

    def _configure(self):
        self.logger.setLevel(getattr(logging, self.config.level.upper(), logging.INFO))
        self.logger.handlers.clear()

        if self.config.format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter('%(asctime)s %(levelname)-7s %(name)s: %(message)s')

        handlers = []
        if self.config.to_console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if self.config.to_file:
            from logging.handlers import RotatingFileHandler
            log_dir = Path(self.config.log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            handlers.append(RotatingFileHandler(
                log_dir / f"{self.name.lower()}.log",
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            ))

        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def _log(self, level: int, message: str, exc_info: bool = False, **context):
        if not self.logger.isEnabledFor(level):
            return
        request_id = current_request_id()
        if request_id is not None:
            context.setdefault('request_id', request_id)

        if self.config.format == 'json':
            rendered = json.dumps({
                'timestamp': _utc_timestamp(),
                'level': logging.getLevelName(level),
                'logger': self.name,
                'message': message,
                **context
            }, default=str)
        else:
            rendered = message
        self.logger.log(level, rendered, exc_info=exc_info, extra=context)

    def debug(self, message: str, **context):
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context):
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context):
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, exc_info: bool = False, **context):
        self._log(logging.ERROR, message, exc_info=exc_info, **context)

    def exception(self, message: str, **context):
        """Log at error level with the active exception's traceback."""
        self._log(logging.ERROR, message, exc_info=True, **context)


class JsonFormatter(logging.Formatter):
    """
    Emits one JSON document per record.

    Records rendered by StructuredLogger pass through (plus traceback);
    records from plain loggers are converted, extra= fields included.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if message.startswith('{'):
            if not record.exc_info:
                return message
            data = json.loads(message)
        else:
            data = {
                'timestamp': _utc_timestamp(),
                'level': record.levelname,
                'logger': record.name,
                'message': message,
            }
            data.update((k, v) for k, v in record.__dict__.items() if k not in _RECORD_ATTRIBUTES)

        if record.exc_info:
            data['traceback'] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


_loggers: Dict[str, StructuredLogger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str) -> StructuredLogger:
    """Get the structured logger for a module (one instance per name)."""
    with _loggers_lock:
        if name not in _loggers:
            _loggers[name] = StructuredLogger(name, get_config().logging)
        return _loggers[name]


def reset_loggers():
    """Drop cached loggers so the next get_logger() picks up new config."""
    with _loggers_lock:
        _loggers.clear()


# =============================================================================
# ERROR HANDLING
# =============================================================================

UNEXPECTED_FAULT = "UNEXPECTED_FAULT"
POOL_MISUSE = "POOL_MISUSE"


class SpellServiceError(Exception):
    """Base exception for the spell service."""

    def __init__(self, message: str, code: str = UNEXPECTED_FAULT,
                 details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class PoolExhaustedError(SpellServiceError):
    """No dictionary could be borrowed within the pool timeout."""
    def __init__(self, locale: str, timeout: float, **kwargs):
        super().__init__(f"No dictionary available for {locale} within {timeout}s",
                         code="POOL_EXHAUSTED",
                         details={'locale': locale, 'timeout': timeout, **kwargs})


class PoolMisuseError(SpellServiceError):
    """A handle was returned to a pool that did not lend it."""
    def __init__(self, message: str = "Can't re-insert a dictionary into its pool", **kwargs):
        super().__init__(message, code=POOL_MISUSE, details=kwargs)


class DictionaryUnavailableError(SpellServiceError):
    """A dictionary backend could not be loaded."""
    def __init__(self, backend: str, reason: Optional[str] = None, **kwargs):
        super().__init__(f"Dictionary backend '{backend}' unavailable: {reason}",
                         code="DICTIONARY_UNAVAILABLE",
                         details={'backend': backend, 'reason': reason, **kwargs})
