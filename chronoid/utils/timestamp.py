"""Millisecond timestamp utilities."""

import time
from datetime import datetime, timedelta, timezone

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def format_timestamp(epoch_ms=None):
    """Format timestamp as ISO 8601 with milliseconds, used for log records."""
    if epoch_ms is None:
        epoch_ms = now_millis()
    return millis_to_datetime(epoch_ms).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def millis_to_datetime(epoch_ms):
    """Aware UTC datetime for integer milliseconds, without float rounding."""
    return UNIX_EPOCH + timedelta(milliseconds=epoch_ms)


def to_rfc3339(epoch_ms, local=False):
    """RFC 3339 string with millisecond precision, UTC or the host's local zone."""
    dt = millis_to_datetime(epoch_ms)
    if local:
        dt = dt.astimezone()
    return dt.isoformat(timespec="milliseconds")
