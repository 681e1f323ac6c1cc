#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Records returned to callers asking for the images of a roll.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ViewImageRecord:
    """One displayable image of a roll.

    `id` is built from the scan ordinal, so it only identifies the image within
    a single scan of an unchanged directory.
    """
    id: str
    roll_id: str
    filename: str
    path: str
    original_path: str
    index_in_roll: int
    width: int
    height: int
    format: str
    file_size: int
    date_modified: str
    is_compressed: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class RollImagesResult:
    """Images of one roll, or an empty list and the reason they could not be read."""
    roll_id: str
    images: List[ViewImageRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roll_id": self.roll_id,
            "images": [img.to_dict() for img in self.images],
            "error": self.error,
        }
