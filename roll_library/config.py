#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global configuration and constants for the Roll Library.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Set

# Source formats a roll directory may contain (RAW formats decode only as far as Pillow can)
SUPPORTED_EXT: Set[str] = {
    ".jpg", ".jpeg", ".png", ".tif", ".tiff",
    ".arw", ".raw", ".cr2", ".nef", ".orf", ".rw2",
}

# Directory names under the cache root
THUMBNAILS_DIRNAME = "thumbnails"
COMPRESSED_DIRNAME = "compressed"
DEFAULT_THUMBNAIL_NAME = "default-thumbnail.jpg"
INDEX_SUFFIX = "_compression_map.json"

# Derived rendition defaults
DEFAULT_TARGET_WIDTH = 1920
DEFAULT_QUALITY = 85

# Roll thumbnail defaults
DEFAULT_THUMBNAIL_SIZE = 300
THUMBNAIL_QUALITY = 80

# Bytes read from the head of a file when looking for EXIF tags
EXIF_PREFIX_BYTES = 65635

DEFAULT_CACHE_ROOT = Path.home() / ".roll_library"
DEFAULT_DB_NAME = "library.db"


@dataclass
class LibraryConfig:
    """Locations and rendition settings shared by the pipeline components."""
    cache_root: Path = field(default_factory=lambda: DEFAULT_CACHE_ROOT)
    target_width: int = DEFAULT_TARGET_WIDTH
    quality: int = DEFAULT_QUALITY
    thumbnail_size: int = DEFAULT_THUMBNAIL_SIZE
    thumbnail_quality: int = THUMBNAIL_QUALITY

    def __post_init__(self):
        self.cache_root = Path(self.cache_root)

    @property
    def thumbnails_dir(self) -> Path:
        return self.cache_root / THUMBNAILS_DIRNAME

    @property
    def compressed_dir(self) -> Path:
        return self.cache_root / COMPRESSED_DIRNAME

    @property
    def default_thumbnail(self) -> Path:
        return self.cache_root / DEFAULT_THUMBNAIL_NAME

    @property
    def db_path(self) -> Path:
        return self.cache_root / DEFAULT_DB_NAME

    @classmethod
    def from_env(cls) -> "LibraryConfig":
        """Build a config, letting ROLL_LIBRARY_* environment variables override defaults."""
        return cls(
            cache_root=Path(os.getenv("ROLL_LIBRARY_CACHE_ROOT", str(DEFAULT_CACHE_ROOT))),
            target_width=int(os.getenv("ROLL_LIBRARY_TARGET_WIDTH", str(DEFAULT_TARGET_WIDTH))),
            quality=int(os.getenv("ROLL_LIBRARY_QUALITY", str(DEFAULT_QUALITY))),
        )
