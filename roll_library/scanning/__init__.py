"""Scanning modules for the Roll Library."""

from .extractor import MetadataExtractor
from .discovery import DirectoryScanner, natural_sort_key, order_listing, is_supported

__all__ = [
    'MetadataExtractor',
    'DirectoryScanner',
    'natural_sort_key',
    'order_listing',
    'is_supported',
]
