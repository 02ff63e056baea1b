"""Microsecond timestamps for log records, snapshots and errors."""

import time
from datetime import datetime, timezone


def now_micros():
    """Wall clock in microseconds since the Unix epoch."""
    return time.time_ns() // 1_000


def format_timestamp(epoch_us=None):
    """ISO 8601 UTC string with microsecond precision, e.g. 2026-01-01T00:00:00.000000Z."""
    if epoch_us is None:
        epoch_us = now_micros()
    seconds, micros = divmod(epoch_us, 1_000_000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ")
