#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Entry points callers use to browse rolls.

RollImageService wires the scanner, the derived image cache, the thumbnail
generator and the catalog together. It is the only layer that turns
directory-level errors into an empty result.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..cache.index import DerivedImageCache
from ..catalog.base import RollCatalog
from ..config import LibraryConfig
from ..errors import GenerationError, NotFoundError
from ..imaging.deriver import BatchDeriver
from ..imaging.thumbnail import ThumbnailGenerator, render_placeholder
from ..models.derivation import DeriveOptions
from ..models.image import SourceImageFile
from ..models.roll import Roll
from ..models.view import RollImagesResult
from ..scanning.discovery import DirectoryScanner
from .assembler import ViewAssembler

logger = logging.getLogger(__name__)


class RollImageService:
    """Browse-time operations over the rolls of one catalog."""

    def __init__(self, catalog: RollCatalog, config: Optional[LibraryConfig] = None,
                 show_progress: bool = False):
        self.catalog = catalog
        self.config = config or LibraryConfig()
        self.options = DeriveOptions(self.config.target_width, self.config.quality)
        self.scanner = DirectoryScanner()
        self.deriver = BatchDeriver(self.config.compressed_dir, self.scanner,
                                    self.options, show_progress=show_progress)
        self.cache = DerivedImageCache(self.config.compressed_dir, self.deriver, self.options)
        self.thumbnails = ThumbnailGenerator(self.config.thumbnails_dir,
                                             self.config.thumbnail_quality)
        self.assembler = ViewAssembler(catalog)

    def read_directory(self, directory) -> List[SourceImageFile]:
        return self.scanner.scan(directory)

    def get_images(self, roll_id: str, use_compressed: bool = True) -> RollImagesResult:
        """Ordered view records for a roll; empty with an error when it can't be read."""
        roll = self.catalog.get_roll(roll_id)
        if roll is None:
            logger.error("Roll not found: %s", roll_id)
            return RollImagesResult(roll_id, error=f"Roll not found: {roll_id}")

        try:
            files = self.scanner.scan(roll.path)
            mapping: Dict[str, str] = {}
            if use_compressed and files:
                mapping = self.cache.get_or_build(roll.path, roll_id)
        except NotFoundError as e:
            logger.error("Cannot read images for roll %s: %s", roll_id, e)
            return RollImagesResult(roll_id, error=str(e))

        images = self.assembler.assemble(roll_id, files, mapping)
        self.assembler.reconcile_image_count(roll, len(files))
        logger.info("Returning %d images for roll %s", len(images), roll_id)
        return RollImagesResult(roll_id, images)

    def generate_thumbnail(self, source_path, size: Optional[int] = None) -> str:
        """Thumbnail path for `source_path`, or the default asset if it can't be made."""
        try:
            return self.thumbnails.generate(source_path, size or self.config.thumbnail_size)
        except GenerationError as e:
            logger.warning("%s; using default thumbnail", e)
            return str(self.default_thumbnail())

    def default_thumbnail(self) -> Path:
        path = self.config.default_thumbnail
        if not path.exists():
            render_placeholder(path, self.config.thumbnail_size)
        return path

    def compress_image(self, image_path, options: Optional[DeriveOptions] = None) -> str:
        """Derived path for one image, or the original path if it can't be derived."""
        try:
            return self.deriver.derive(image_path, options or self.options)
        except GenerationError as e:
            logger.warning("%s; using original", e)
            return str(image_path)

    def batch_compress(self, directory, options: Optional[DeriveOptions] = None) -> Dict[str, str]:
        try:
            return self.deriver.derive_directory(directory, options or self.options)
        except NotFoundError as e:
            logger.error("Batch compression failed: %s", e)
            return {}

    def import_roll(self, name: str, directory) -> Roll:
        """Add a roll to the catalog with its image count and a thumbnail of its first image.

        Raises NotFoundError when the directory cannot be listed.
        """
        path = Path(directory).absolute()
        files = self.scanner.scan(path)
        thumbnail = self.generate_thumbnail(files[0].path) if files else str(self.default_thumbnail())
        return self.catalog.add_roll(name, str(path), image_count=len(files),
                                     thumbnail_path=thumbnail)

    def remove_roll(self, roll_id: str) -> bool:
        """Delete a roll from the catalog and drop its cache index."""
        self.cache.invalidate(roll_id)
        return self.catalog.delete_roll(roll_id)

    def cleanup_thumbnails(self) -> int:
        return self.thumbnails.cleanup(self.catalog.list_thumbnail_paths())
