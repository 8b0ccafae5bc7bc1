"""Timestamp formatting for logs, errors and identifier times."""

import time
from datetime import datetime, timezone

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def format_datetime(dt):
    """Format an aware datetime as UTC ISO 8601 with microseconds."""
    return dt.astimezone(timezone.utc).strftime(ISO_FORMAT)


def format_timestamp(epoch_us=None):
    """Format microseconds since the Unix epoch, defaulting to now."""
    if epoch_us is None:
        epoch_us = now_micros()
    return format_datetime(datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc))
