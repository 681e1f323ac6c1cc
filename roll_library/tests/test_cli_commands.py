#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the Roll Library CLI commands.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from roll_library.main import build_config, create_parser, main

from conftest import make_image


def _json_out(capsys):
    out = capsys.readouterr().out.strip().splitlines()
    return json.loads(out[-1])


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the CLI from reconfiguring the root logger during tests."""
    with patch("roll_library.main.enable_json_logging"), patch("roll_library.main.setup_logging"):
        yield


@pytest.fixture
def cli(tmp_path):
    root = tmp_path / "cache"

    def run(*args):
        return main(["--cache-root", str(root), *args])
    run.root = root
    return run


class TestParser:

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_images_arguments(self):
        args = create_parser().parse_args(["--width", "1280", "images", "--roll-id", "r1", "--json"])
        assert (args.command, args.roll_id, args.json, args.width) == ("images", "r1", True, 1280)
        assert args.originals is False


class TestRollCommands:

    def test_add_list_and_images(self, cli, roll_dir, capsys):
        assert cli("add-roll", "--name", "HP5", "--path", str(roll_dir), "--json") == 0
        added = _json_out(capsys)
        assert added["result"] == "success"
        roll_id = added["data"]["id"]
        assert added["data"]["image_count"] == 3

        assert cli("list-rolls", "--json") == 0
        assert [r["id"] for r in _json_out(capsys)["data"]] == [roll_id]

        assert cli("images", "--roll-id", roll_id, "--json") == 0
        payload = _json_out(capsys)
        assert payload["meta"]["count"] == 3
        assert [img["filename"] for img in payload["data"]] == ["a1.jpg", "a2.jpg", "a10.jpg"]
        assert all(img["is_compressed"] for img in payload["data"])
        assert (cli.root / "compressed" / f"{roll_id}_compression_map.json").exists()

    def test_add_roll_missing_directory(self, cli, tmp_path, capsys):
        assert cli("add-roll", "--name", "X", "--path", str(tmp_path / "gone"), "--json") == 1
        assert _json_out(capsys)["result"] == "error"

    def test_images_unknown_roll(self, cli, capsys):
        assert cli("images", "--roll-id", "nope", "--json") == 1
        assert "Roll not found" in _json_out(capsys)["error"]

    def test_images_originals(self, cli, roll_dir, capsys):
        cli("add-roll", "--name", "HP5", "--path", str(roll_dir), "--json")
        roll_id = _json_out(capsys)["data"]["id"]
        assert cli("images", "--roll-id", roll_id, "--originals", "--json") == 0
        assert not any(img["is_compressed"] for img in _json_out(capsys)["data"])

    def test_remove_roll(self, cli, roll_dir, capsys):
        cli("add-roll", "--name", "HP5", "--path", str(roll_dir), "--json")
        roll_id = _json_out(capsys)["data"]["id"]
        assert cli("remove-roll", "--roll-id", roll_id, "--json") == 0
        capsys.readouterr()
        assert cli("remove-roll", "--roll-id", roll_id, "--json") == 1

    def test_human_readable_listing(self, cli, roll_dir, capsys):
        cli("add-roll", "--name", "HP5", "--path", str(roll_dir))
        out = capsys.readouterr().out
        assert "Added roll" in out and "(3 images)" in out


class TestImageCommands:

    def test_scan(self, cli, roll_dir, capsys):
        assert cli("scan", "--dir", str(roll_dir), "--json") == 0
        payload = _json_out(capsys)
        assert [f["index"] for f in payload["data"]] == [0, 1, 2]
        assert payload["data"][0]["metadata"]["width"] == 2400

    def test_scan_missing_directory(self, cli, tmp_path, capsys):
        assert cli("scan", "--dir", str(tmp_path / "gone")) == 1
        assert "Error" in capsys.readouterr().out

    def test_compress_uses_width_flag(self, cli, roll_dir, capsys):
        assert cli("--width", "400", "compress", "--dir", str(roll_dir), "--json") == 0
        payload = _json_out(capsys)
        assert payload["meta"]["derived"] == 3
        from PIL import Image
        for derived in payload["data"].values():
            with Image.open(derived) as img:
                assert img.width == 400

    def test_invalid_quality(self, cli, roll_dir, capsys):
        assert cli("--quality", "200", "compress", "--dir", str(roll_dir), "--json") == 1
        assert _json_out(capsys)["result"] == "error"


class TestThumbnailCommands:

    def test_thumbnail_and_cleanup(self, cli, tmp_path, capsys):
        src = make_image(tmp_path / "a.jpg", (300, 200))
        assert cli("thumbnail", "--source", str(src), "--size", "64", "--json") == 0
        data = _json_out(capsys)["data"]
        assert data["is_default"] is False
        assert Path(data["path"]).exists()

        assert cli("cleanup-thumbnails", "--json") == 0
        assert _json_out(capsys)["data"]["deleted"] == 1
        assert not Path(data["path"]).exists()

    def test_thumbnail_default_fallback(self, cli, tmp_path, capsys):
        assert cli("thumbnail", "--source", str(tmp_path / "missing.jpg"), "--json") == 0
        data = _json_out(capsys)["data"]
        assert data["is_default"] is True
        assert Path(data["path"]).exists()


class TestValidation:

    @pytest.mark.parametrize("flag", ["--width", "--quality"])
    def test_zero_is_rejected_not_ignored(self, cli, roll_dir, capsys, flag):
        assert cli(flag, "0", "compress", "--dir", str(roll_dir), "--json") == 1
        assert _json_out(capsys)["result"] == "error"

    def test_explicit_values_override_config(self):
        args = create_parser().parse_args(["--width", "0", "--quality", "0", "list-rolls"])
        config = build_config(args)
        assert (config.target_width, config.quality) == (0, 0)


class TestTimeout:

    def test_timeout_leaves_catalog_open(self, cli, capsys):
        with patch("roll_library.main.with_timeout", side_effect=TimeoutError("Operation exceeded 1 seconds")), \
                patch("roll_library.main.SQLiteRollCatalog.close") as close:
            assert cli("--timeout", "1", "list-rolls", "--json") == 124
        close.assert_not_called()
        payload = _json_out(capsys)
        assert payload["result"] == "error"
        assert "exceeded" in payload["error"]

    def test_catalog_closed_after_normal_run(self, cli):
        with patch("roll_library.main.SQLiteRollCatalog.close") as close:
            assert cli("list-rolls", "--json") == 0
        close.assert_called_once()
