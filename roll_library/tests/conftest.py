#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Shared fixtures for the Roll Library tests.
"""

from pathlib import Path
from typing import Optional, Tuple

import pytest
from PIL import Image

from roll_library.catalog.manager import SQLiteRollCatalog
from roll_library.config import LibraryConfig
from roll_library.service.rolls import RollImageService


def make_image(path: Path, size: Tuple[int, int] = (640, 480), color=(120, 60, 30),
               fmt: Optional[str] = None, exif: Optional[dict] = None) -> Path:
    """Write a solid-colour test image; `exif` maps numeric tag ids to values."""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new("RGB", size, color)
    kwargs = {}
    if exif:
        ex = Image.Exif()
        for tag, value in exif.items():
            ex[tag] = value
        kwargs["exif"] = ex
    img.save(path, fmt or ("PNG" if path.suffix.lower() == ".png" else "JPEG"), **kwargs)
    return path


def make_corrupt(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"this is not an image" * 10)
    return path


@pytest.fixture
def roll_dir(tmp_path):
    """The a1/a2/a10 roll, plus a file that must be ignored."""
    d = tmp_path / "roll"
    make_image(d / "a1.jpg", (2400, 1600))
    make_image(d / "a2.jpg", (3000, 2000))
    make_image(d / "a10.jpg", (800, 600))
    (d / "notes.txt").write_text("contact sheet notes")
    return d


@pytest.fixture
def config(tmp_path):
    return LibraryConfig(cache_root=tmp_path / "cache", target_width=1920, quality=85)


@pytest.fixture
def catalog(tmp_path):
    cat = SQLiteRollCatalog(tmp_path / "cache" / "library.db")
    yield cat
    cat.close()


@pytest.fixture
def service(catalog, config):
    return RollImageService(catalog, config)
