#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for derived (display) renditions in the Roll Library.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import DEFAULT_QUALITY, DEFAULT_TARGET_WIDTH


@dataclass(frozen=True)
class DeriveOptions:
    """Resize and encoding settings for derived renditions."""
    target_width: int = DEFAULT_TARGET_WIDTH
    quality: int = DEFAULT_QUALITY

    def __post_init__(self):
        if self.target_width < 1:
            raise ValueError(f"target_width must be positive, got {self.target_width}")
        if not 1 <= self.quality <= 100:
            raise ValueError(f"quality must be between 1 and 100, got {self.quality}")


@dataclass
class DerivationOutcome:
    """Result of deriving one file: a rendition path, or the original plus the reason."""
    original_path: str
    display_path: str
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.error is not None
