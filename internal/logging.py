import json
import os
import sys
import threading
from enum import IntEnum

from core.errors import ConfigError
from utils.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name):
        key = str(name).upper()
        if key == "WARNING":
            return cls.WARN
        try:
            return cls[key]
        except KeyError:
            raise ConfigError(f"unknown log level {name!r}, expected one of {', '.join(cls.__members__)}") from None


_logger = None
_logger_lock = threading.Lock()


class StructuredLogger:
    """JSON-lines logger. Writes to path when given, otherwise to stderr."""

    def __init__(self, level=LogLevel.INFO, path=None):
        self.level = level
        self.path = path
        self.written = 0
        if path:
            log_dir = os.path.dirname(path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
        if error is not None:
            record["err"] = str(error)
        line = json.dumps(record, default=str)
        try:
            if self.path:
                with open(self.path, "a", encoding="utf-8") as f:
                    f.write(line + "\n")
            else:
                print(line, file=sys.stderr, flush=True)
            self.written += 1
        except OSError:
            # A broken log sink must not take the game down with it
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
    def configure(cls, min_level=LogLevel.INFO, path=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, path)
        return _logger


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
