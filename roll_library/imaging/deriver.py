#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Derived (display) rendition generation for the Roll Library.

Sources are processed one at a time: scanned RAW and TIFF files can be very
large, and only one decoded image is held in memory at any point.
"""

import logging
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from PIL import Image
from tqdm import tqdm

from ..errors import GenerationError
from ..models.derivation import DerivationOutcome, DeriveOptions
from ..models.image import SourceImageFile
from ..scanning.discovery import DirectoryScanner
from ..utils.path import ensure_dir

logger = logging.getLogger(__name__)


def target_size(width: int, height: int, target_width: int):
    """Size of the rendition: at most `target_width` wide, never upscaled."""
    if width <= target_width:
        return width, height
    return target_width, max(1, round(target_width * height / width))


class BatchDeriver:
    """Produces downsized JPEG renditions of a roll's images."""

    def __init__(self, compressed_dir: Path, scanner: Optional[DirectoryScanner] = None,
                 options: Optional[DeriveOptions] = None, show_progress: bool = False):
        self.compressed_dir = Path(compressed_dir)
        self.scanner = scanner or DirectoryScanner()
        self.options = options or DeriveOptions()
        self.show_progress = show_progress

    def derive(self, image_path, options: Optional[DeriveOptions] = None) -> str:
        """Write one rendition of `image_path` and return its path."""
        opts = options or self.options
        source = Path(image_path)
        if not source.is_file():
            raise GenerationError(f"Source image does not exist: {source}")

        try:
            ensure_dir(self.compressed_dir)
        except OSError as e:
            raise GenerationError(f"Cannot create rendition directory {self.compressed_dir}: {e}") from e
        output = self.compressed_dir / f"{source.stem}_compressed_{uuid.uuid4()}.jpg"

        try:
            with Image.open(source) as img:
                size = target_size(img.width, img.height, opts.target_width)
                rendition = img.convert("RGB")
                if size != rendition.size:
                    rendition = rendition.resize(size, Image.LANCZOS)
                rendition.save(output, "JPEG", quality=opts.quality, progressive=True)
        except Exception as e:
            output.unlink(missing_ok=True)
            raise GenerationError(f"Could not derive {source}: {e}") from e

        logger.debug("Derived %s -> %s (%dx%d)", source, output, *size)
        return str(output)

    def derive_files(self, files: Sequence[SourceImageFile],
                     options: Optional[DeriveOptions] = None) -> List[DerivationOutcome]:
        """Derive every file in order; a failure maps that file to itself."""
        outcomes = []
        progress = tqdm(files, desc="Deriving", unit="img", disable=not self.show_progress)
        for i, image in enumerate(progress, start=1):
            logger.debug("Deriving image %d/%d: %s", i, len(files), image.filename)
            try:
                outcomes.append(DerivationOutcome(image.path, self.derive(image.path, options)))
            except GenerationError as e:
                logger.warning("Using original for %s: %s", image.filename, e)
                outcomes.append(DerivationOutcome(image.path, image.path, error=str(e)))
        return outcomes

    def derive_directory(self, directory, options: Optional[DeriveOptions] = None) -> Dict[str, str]:
        """Scan `directory` and return {original path: display path} for every image.

        Raises NotFoundError when the directory cannot be listed.
        """
        files = self.scanner.scan(directory)
        logger.info("Deriving %d images from %s", len(files), directory)
        outcomes = self.derive_files(files, options)
        failed = sum(1 for o in outcomes if o.degraded)
        if failed:
            logger.warning("%d of %d images in %s kept their original", failed, len(outcomes), directory)
        return {o.original_path: o.display_path for o in outcomes}
