#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Metadata extraction for the Roll Library.

Three independent steps feed one ImageMetadata: file stats, EXIF tags parsed
from a bounded prefix of the file, and pixel dimensions probed with Pillow.
A failing step only blanks its own fields.
"""

import io
import logging
import warnings
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, Tuple

from PIL import ExifTags, Image
from PIL.TiffImagePlugin import IFDRational

from ..config import EXIF_PREFIX_BYTES
from ..errors import MetadataError
from ..models.image import ImageMetadata
from ..utils.time import iso_from_timestamp

logger = logging.getLogger(__name__)
logging.getLogger("PIL.TiffImagePlugin").setLevel(logging.WARNING)

# Suppress PIL warnings
warnings.filterwarnings("ignore", category=UserWarning,
                        message=".*Palette images with Transparency expressed in bytes.*")


class MetadataExtractor:
    """Best-effort metadata extraction; `extract` never raises."""

    def __init__(self, exif_prefix_bytes: int = EXIF_PREFIX_BYTES):
        self.exif_prefix_bytes = exif_prefix_bytes

    def extract(self, file_path) -> ImageMetadata:
        """Extract metadata for a single file."""
        path = Path(file_path)
        meta = ImageMetadata(format=path.suffix[1:].upper())

        try:
            meta.size, meta.date_modified = self._read_stats(path)
        except MetadataError as e:
            meta.issues[e.step] = e.message

        try:
            meta.exif = self._read_exif(path)
        except MetadataError as e:
            meta.issues[e.step] = e.message

        try:
            meta.width, meta.height = self._read_dimensions(path)
        except MetadataError as e:
            meta.issues[e.step] = e.message

        if meta.issues:
            logger.debug("Degraded metadata for %s: %s", path, meta.issues)
        return meta

    def _read_stats(self, path: Path) -> Tuple[int, str]:
        try:
            st = path.stat()
        except OSError as e:
            raise MetadataError("stat", str(e)) from e
        return st.st_size, iso_from_timestamp(st.st_mtime)

    def _read_exif(self, path: Path) -> Dict[str, Any]:
        """Parse EXIF from the first `exif_prefix_bytes` of the file."""
        try:
            with path.open("rb") as f:
                head = f.read(self.exif_prefix_bytes)
        except OSError as e:
            raise MetadataError("exif", str(e)) from e

        try:
            with Image.open(io.BytesIO(head)) as img:
                exif = img.getexif()
                tags = {ExifTags.TAGS.get(tag_id, str(tag_id)): _plain(value)
                        for tag_id, value in exif.items()}
                # Exposure data lives in the Exif sub-IFD
                sub_ifd = exif.get_ifd(ExifTags.IFD.Exif)
                tags.update({ExifTags.TAGS.get(tag_id, str(tag_id)): _plain(value)
                             for tag_id, value in sub_ifd.items()})
        except Exception as e:
            raise MetadataError("exif", f"{type(e).__name__}: {e}") from e
        return tags

    def _read_dimensions(self, path: Path) -> Tuple[int, int]:
        try:
            with Image.open(path) as img:
                return img.size
        except Exception as e:
            raise MetadataError("dimensions", f"{type(e).__name__}: {e}") from e


def _plain(value: Any) -> Any:
    """Turn EXIF values into JSON-friendly Python values."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace").rstrip("\x00")
    if isinstance(value, (Fraction, IFDRational)):
        try:
            return float(value)
        except (ZeroDivisionError, ValueError):
            return 0.0
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    if isinstance(value, str):
        return value.rstrip("\x00")
    return value
