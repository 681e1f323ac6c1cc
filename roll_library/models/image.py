#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for scanned source images in the Roll Library.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ImageMetadata:
    """Best-effort metadata for one source file.

    Every field has a safe default so a failed extraction step leaves a usable
    record. `issues` maps the name of each degraded step ('stat', 'exif',
    'dimensions') to the reason it failed.
    """
    width: int = 0
    height: int = 0
    format: str = ""
    size: int = 0
    date_modified: Optional[str] = None
    exif: Dict[str, Any] = field(default_factory=dict)
    issues: Dict[str, str] = field(default_factory=dict)

    @property
    def degraded(self) -> bool:
        return bool(self.issues)


@dataclass
class SourceImageFile:
    """One image of a roll as seen by the most recent scan."""
    path: str
    filename: str
    index: int  # recomputed on every scan, not an identity
    metadata: ImageMetadata = field(default_factory=ImageMetadata)
