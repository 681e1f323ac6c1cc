#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
What the image pipeline needs from the roll catalog.
"""

from typing import List, Optional, Protocol

from ..models.roll import Roll


class RollCatalog(Protocol):
    """Supplies roll directories and accepts observed image counts."""

    def get_roll(self, roll_id: str) -> Optional[Roll]:
        ...

    def update_image_count(self, roll_id: str, image_count: int) -> bool:
        ...

    def list_rolls(self) -> List[Roll]:
        ...

    def list_thumbnail_paths(self) -> List[str]:
        ...

    def add_roll(self, name: str, path: str, image_count: int = 0,
                 thumbnail_path: Optional[str] = None) -> Roll:
        ...

    def delete_roll(self, roll_id: str) -> bool:
        ...
