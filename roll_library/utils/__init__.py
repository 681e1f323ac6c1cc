"""Utility functions for the Roll Library."""

from .time import utc_now_str, iso_from_timestamp
from .path import ensure_dir, atomic_write_text

__all__ = ['utc_now_str', 'iso_from_timestamp', 'ensure_dir', 'atomic_write_text']
