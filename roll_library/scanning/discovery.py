#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Roll directory discovery for the Roll Library.

A roll has no stored per-image rows: every scan lists the directory, keeps the
supported formats and numbers them in natural order. Ordering is kept in pure
functions so it can be tested without a filesystem.
"""

import logging
import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..config import SUPPORTED_EXT
from ..errors import NotFoundError
from ..models.image import SourceImageFile
from .extractor import MetadataExtractor

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"\d+")


def is_supported(filename: str) -> bool:
    """True when the extension (any case) is a supported source format."""
    return os.path.splitext(filename)[1].lower() in SUPPORTED_EXT


def natural_sort_key(filename: str) -> Tuple[int, str]:
    """First run of digits as a number (0 if none), then the full name."""
    m = _DIGITS.search(filename)
    return (int(m.group()) if m else 0, filename)


def order_listing(names: Iterable[str]) -> List[Tuple[int, str]]:
    """Filter a raw directory listing and assign scan ordinals.

    >>> order_listing(["a10.jpg", "notes.txt", "a2.JPG", "a1.jpg"])
    [(0, 'a1.jpg'), (1, 'a2.JPG'), (2, 'a10.jpg')]
    """
    kept = sorted((n for n in names if is_supported(n)), key=natural_sort_key)
    return list(enumerate(kept))


class DirectoryScanner:
    """Lists a roll directory and extracts metadata for each image."""

    def __init__(self, extractor: Optional[MetadataExtractor] = None):
        self.extractor = extractor or MetadataExtractor()

    def list_directory(self, directory) -> List[str]:
        """Names of the regular files in `directory`."""
        root = Path(directory)
        if not root.is_dir():
            raise NotFoundError(f"Directory does not exist: {root}")
        try:
            with os.scandir(root) as it:
                return [entry.name for entry in it if entry.is_file()]
        except OSError as e:
            raise NotFoundError(f"Directory is not readable: {root} ({e})") from e

    def scan(self, directory) -> List[SourceImageFile]:
        """Return the roll's images in natural order, each with its metadata."""
        root = Path(directory).absolute()
        logger.debug("Reading directory: %s", root)
        ordered = order_listing(self.list_directory(root))
        logger.info("Found %d supported image files in %s", len(ordered), root)

        files = []
        for index, name in ordered:
            path = root / name
            files.append(SourceImageFile(
                path=str(path),
                filename=name,
                index=index,
                metadata=self.extractor.extract(path),
            ))
        return files
