#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Time utility functions for the Roll Library.
"""

from datetime import datetime, timezone


def utc_now_str() -> str:
    """Return current UTC time in ISO-8601 format with millisecond precision and 'Z'."""
    return iso_from_timestamp(datetime.now(timezone.utc).timestamp())


def iso_from_timestamp(ts: float) -> str:
    """Convert a POSIX timestamp (e.g. st_mtime) to an ISO-8601 UTC string."""
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
