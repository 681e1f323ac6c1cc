#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Roll thumbnail generation for the Roll Library.
"""

import logging
import uuid
from pathlib import Path
from typing import Iterable

from PIL import Image, ImageOps

from ..config import DEFAULT_THUMBNAIL_SIZE, THUMBNAIL_QUALITY
from ..errors import GenerationError
from ..utils.path import ensure_dir

logger = logging.getLogger(__name__)


class ThumbnailGenerator:
    """Square, cover-cropped roll thumbnails written under unique names."""

    def __init__(self, thumbnails_dir: Path, quality: int = THUMBNAIL_QUALITY):
        self.thumbnails_dir = Path(thumbnails_dir)
        self.quality = quality

    def generate(self, source_path, edge_size: int = DEFAULT_THUMBNAIL_SIZE) -> str:
        """Render `source_path` as an `edge_size` square JPEG and return its path.

        Every call writes a new file; previous thumbnails of the same source are
        neither reused nor removed.
        """
        source = Path(source_path)
        if not source.is_file():
            raise GenerationError(f"Source image does not exist: {source}")

        try:
            ensure_dir(self.thumbnails_dir)
        except OSError as e:
            raise GenerationError(f"Cannot create thumbnail directory {self.thumbnails_dir}: {e}") from e
        output = self.thumbnails_dir / f"{uuid.uuid4()}.jpg"
        logger.debug("Generating %dpx thumbnail for %s -> %s", edge_size, source, output)

        try:
            with Image.open(source) as img:
                fitted = ImageOps.fit(img.convert("RGB"), (edge_size, edge_size),
                                      method=Image.LANCZOS)
                fitted.save(output, "JPEG", quality=self.quality)
        except Exception as e:
            output.unlink(missing_ok=True)
            raise GenerationError(f"Could not generate thumbnail for {source}: {e}") from e

        logger.info("Thumbnail generated at %s", output)
        return str(output)

    def cleanup(self, active_paths: Iterable[str]) -> int:
        """Delete thumbnails no roll refers to; return how many were removed."""
        if not self.thumbnails_dir.is_dir():
            return 0
        active = [str(p) for p in active_paths if p]
        active_names = {Path(p).name for p in active}
        active_full = set(active)

        deleted = 0
        for thumb in self.thumbnails_dir.iterdir():
            if not thumb.is_file():
                continue
            if str(thumb) in active_full or thumb.name in active_names:
                continue
            try:
                thumb.unlink()
                deleted += 1
            except OSError as e:
                logger.warning("Could not remove unused thumbnail %s: %s", thumb, e)
        logger.info("Removed %d unused thumbnails", deleted)
        return deleted


def render_placeholder(target: Path, edge_size: int = DEFAULT_THUMBNAIL_SIZE) -> Path:
    """Write the neutral default thumbnail used when a roll has no usable image."""
    target = Path(target)
    ensure_dir(target.parent)
    Image.new("RGB", (edge_size, edge_size), (200, 200, 200)).save(target, "JPEG",
                                                                   quality=THUMBNAIL_QUALITY)
    return target
