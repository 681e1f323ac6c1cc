#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for roll directory scanning and natural ordering.
"""

from pathlib import Path

import pytest

from roll_library.errors import NotFoundError
from roll_library.scanning.discovery import (
    DirectoryScanner, is_supported, natural_sort_key, order_listing
)

from conftest import make_corrupt, make_image


class TestNaturalOrdering:
    """Ordering helpers work on plain listings, no filesystem involved."""

    def test_numeric_not_lexicographic(self):
        assert [n for _, n in order_listing(["a10.jpg", "a1.jpg", "a2.jpg"])] == \
            ["a1.jpg", "a2.jpg", "a10.jpg"]

    def test_ordinals_follow_sorted_position(self):
        assert order_listing(["b.jpg", "3.tif", "12.png"]) == \
            [(0, "b.jpg"), (1, "3.tif"), (2, "12.png")]

    def test_equal_numbers_break_ties_by_filename(self):
        assert [n for _, n in order_listing(["img1.jpg", "img01.jpg", "frame1.jpg"])] == \
            ["frame1.jpg", "img01.jpg", "img1.jpg"]

    def test_only_first_digit_run_counts(self):
        assert natural_sort_key("roll2_frame30.jpg") == (2, "roll2_frame30.jpg")
        assert natural_sort_key("untitled.jpg") == (0, "untitled.jpg")

    def test_unsupported_extensions_are_dropped(self):
        listing = ["1.jpg", "2.txt", "3.xmp", "4.NEF", "5.Tiff", ".DS_Store"]
        assert [n for _, n in order_listing(listing)] == ["1.jpg", "4.NEF", "5.Tiff"]

    @pytest.mark.parametrize("name", ["a.jpg", "a.JPEG", "a.png", "a.tif", "a.TIFF", "a.arw",
                                      "a.raw", "a.cr2", "a.nef", "a.orf", "a.rw2"])
    def test_supported_extensions(self, name):
        assert is_supported(name)

    @pytest.mark.parametrize("name", ["a.gif", "a.webp", "a.heic", "jpg", "a.jpg.bak"])
    def test_unsupported_extensions(self, name):
        assert not is_supported(name)


class TestDirectoryScanner:
    """Scanning real directories."""

    def test_scan_orders_naturally(self, roll_dir):
        files = DirectoryScanner().scan(roll_dir)
        assert [f.filename for f in files] == ["a1.jpg", "a2.jpg", "a10.jpg"]
        assert [f.index for f in files] == [0, 1, 2]

    def test_one_record_per_supported_file(self, tmp_path):
        for i in range(5):
            make_image(tmp_path / f"frame{i}.png", (10, 10))
        for i in range(7):
            (tmp_path / f"sidecar{i}.xmp").write_text("<x/>")
        files = DirectoryScanner().scan(tmp_path)
        assert len(files) == 5
        assert len({f.path for f in files}) == 5

    def test_paths_are_absolute(self, roll_dir):
        files = DirectoryScanner().scan(roll_dir)
        assert all(Path(f.path).is_absolute() for f in files)
        assert files[0].path == str(roll_dir.absolute() / "a1.jpg")

    def test_metadata_attached(self, roll_dir):
        first = DirectoryScanner().scan(roll_dir)[0]
        assert (first.metadata.width, first.metadata.height) == (2400, 1600)
        assert first.metadata.format == "JPG"

    def test_directories_with_image_names_are_skipped(self, roll_dir):
        (roll_dir / "a5.jpg").mkdir()
        assert "a5.jpg" not in [f.filename for f in DirectoryScanner().scan(roll_dir)]

    def test_bad_file_does_not_abort_scan(self, roll_dir):
        make_corrupt(roll_dir / "a3.jpg")
        files = DirectoryScanner().scan(roll_dir)
        assert [f.filename for f in files] == ["a1.jpg", "a2.jpg", "a3.jpg", "a10.jpg"]
        broken = files[2].metadata
        assert (broken.width, broken.height) == (0, 0)
        assert broken.degraded

    def test_missing_directory(self, tmp_path):
        with pytest.raises(NotFoundError):
            DirectoryScanner().scan(tmp_path / "nope")

    def test_file_instead_of_directory(self, tmp_path):
        f = make_image(tmp_path / "1.jpg", (10, 10))
        with pytest.raises(NotFoundError):
            DirectoryScanner().scan(f)

    def test_empty_directory(self, tmp_path):
        assert DirectoryScanner().scan(tmp_path) == []
