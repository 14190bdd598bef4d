"""JSON-lines logging to stderr. Emitting a record never raises."""

import json
import sys
import threading
from enum import IntEnum
from chronoid.utils.timestamp import format_timestamp

class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name):
        """Level from a config string; accepts WARNING as an alias for WARN."""
        key = str(name).strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown log level: {name!r}") from None

_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    def __init__(self, level=LogLevel.INFO, fields=None):
        self.level = level
        self.fields = fields or {}

    def bind(self, **fields):
        """Child logger that adds `fields` to every record. Shares the level."""
        return BoundLogger(self, {**self.fields, **fields})

    def _emit(self, level, message, error=None, fields=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message,
                      **self.fields, **(fields or {}), **kwargs}
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=sys.stderr, flush=True)
        except Exception:
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO):
        global _logger
        with _logger_lock:
            _logger = cls(min_level)


class BoundLogger:
    """Resolves the process logger on every call so reconfiguration applies."""

    def __init__(self, parent, fields):
        self._parent = parent
        self.fields = fields

    def _target(self):
        return get_logger() if self._parent is None else self._parent

    def bind(self, **fields):
        return BoundLogger(self._parent, {**self.fields, **fields})

    def debug(self, message, **kwargs):
        self._target()._emit(LogLevel.DEBUG, message, fields=self.fields, **kwargs)

    def info(self, message, **kwargs):
        self._target()._emit(LogLevel.INFO, message, fields=self.fields, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._target()._emit(LogLevel.WARN, message, error, fields=self.fields, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._target()._emit(LogLevel.ERROR, message, error, fields=self.fields, **kwargs)


def get_logger(**fields):
    """Process-wide logger; with fields, a bound view that follows reconfiguration."""
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    if fields:
        return BoundLogger(None, fields)
    return _logger
