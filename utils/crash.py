"""Last-resort handler for exceptions that escape the game loop."""

import json
import os
import sys
import traceback

from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp

_crash_log = "logs/crash.log"


def configure(crash_file):
    """Point crash records at crash_file (from LoggingConfig.crash_file)."""
    global _crash_log
    _crash_log = crash_file


def _append_record(record):
    # Crash reporting must never raise on top of the original failure.
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, default=str) + "\n")
    except OSError:
        pass


def log_crash(exc_type, exc_value, exc_tb, context=None):
    """Report an uncaught exception to stderr and the crash log. Returns the crash id."""
    crash_id = generate_ksuid()
    timestamp = format_timestamp()
    name = exc_type.__name__ if exc_type else "Unknown"
    message = str(exc_value) if exc_value is not None else ""
    tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))

    rule = "=" * 60
    sys.stderr.write(f"\n{rule}\nCRASH [{crash_id}] {timestamp}\n{rule}\n")
    sys.stderr.write(f"{name}: {message}\n{'-' * 60}\n{tb}{rule}\n\n")

    record = {"id": crash_id, "timestamp": timestamp, "type": name, "msg": message, "traceback": tb}
    if context:
        record["context"] = context
    _append_record(record)
    return crash_id


def install_crash_handler():
    """Route uncaught exceptions through log_crash."""
    sys.excepthook = log_crash
