#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for roll thumbnail generation and cleanup.
"""

from pathlib import Path

import pytest
from PIL import Image

from roll_library.errors import GenerationError
from roll_library.imaging.thumbnail import ThumbnailGenerator, render_placeholder

from conftest import make_corrupt, make_image


@pytest.fixture
def generator(tmp_path):
    return ThumbnailGenerator(tmp_path / "thumbnails")


class TestGenerate:

    def test_square_cover_crop(self, tmp_path, generator):
        src = make_image(tmp_path / "wide.jpg", (1200, 400))
        out = Path(generator.generate(src, 300))
        assert out.parent == generator.thumbnails_dir
        with Image.open(out) as img:
            assert img.size == (300, 300)
            assert img.format == "JPEG"

    def test_unique_file_per_call(self, tmp_path, generator):
        src = make_image(tmp_path / "a.jpg", (100, 100))
        first, second = generator.generate(src, 50), generator.generate(src, 50)
        assert first != second
        assert Path(first).exists() and Path(second).exists()

    def test_missing_source(self, tmp_path, generator):
        with pytest.raises(GenerationError):
            generator.generate(tmp_path / "gone.jpg")

    def test_undecodable_source(self, tmp_path, generator):
        with pytest.raises(GenerationError):
            generator.generate(make_corrupt(tmp_path / "bad.jpg"))
        assert list(generator.thumbnails_dir.iterdir()) == []

    def test_unusable_thumbnail_directory(self, tmp_path):
        blocked = tmp_path / "thumbnails"
        blocked.write_text("not a directory")
        src = make_image(tmp_path / "a.jpg", (100, 100))
        with pytest.raises(GenerationError):
            ThumbnailGenerator(blocked).generate(src, 50)


class TestCleanup:

    def test_removes_only_inactive(self, tmp_path, generator):
        src = make_image(tmp_path / "a.jpg", (64, 64))
        keep_full = generator.generate(src, 32)
        keep_by_name = generator.generate(src, 32)
        drop = generator.generate(src, 32)

        deleted = generator.cleanup([keep_full, f"/elsewhere/{Path(keep_by_name).name}", None])

        assert deleted == 1
        assert Path(keep_full).exists()
        assert Path(keep_by_name).exists()
        assert not Path(drop).exists()

    def test_no_directory_yet(self, generator):
        assert generator.cleanup([]) == 0


def test_placeholder(tmp_path):
    target = render_placeholder(tmp_path / "assets" / "default-thumbnail.jpg", 120)
    with Image.open(target) as img:
        assert img.size == (120, 120)
