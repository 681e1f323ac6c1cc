#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Catalog-side roll record used by the Roll Library.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class Roll:
    """A named collection of images living in one source directory."""
    id: str
    name: str
    path: str
    image_count: int = 0
    thumbnail_path: Optional[str] = None
    date_imported: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
