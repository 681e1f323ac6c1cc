#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Image listing and derivation commands for the Roll Library.

Each command returns a process exit code. With as_json=True a single JSON
object is written to stdout, otherwise a human-readable listing.
"""

from dataclasses import asdict
from typing import Optional

from ..errors import NotFoundError
from ..jsonio import error, success
from ..models.derivation import DeriveOptions
from ..service.rolls import RollImageService


def _human_size(n: int) -> str:
    size = float(n)
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def cmd_images(service: RollImageService, roll_id: str, use_compressed: bool = True,
               as_json: bool = False) -> int:
    """List the images of a roll, deriving display renditions as needed."""
    result = service.get_images(roll_id, use_compressed=use_compressed)

    if as_json:
        if not result.ok:
            return error("images", result.error)
        return success("images", [img.to_dict() for img in result.images],
                       meta={"roll_id": roll_id, "count": len(result.images)})

    if not result.ok:
        print(f"Error: {result.error}")
        return 1
    if not result.images:
        print("No images found.")
        return 0

    print(f"Roll {roll_id}: {len(result.images)} images")
    for img in result.images:
        marker = "*" if img.is_compressed else " "
        print(f"  {img.index_in_roll:4d} {marker} {img.filename:<32} "
              f"{img.width}x{img.height} {img.format:<5} {_human_size(img.file_size):>9}  {img.path}")
    return 0


def cmd_scan(service: RollImageService, directory: str, as_json: bool = False) -> int:
    """Scan a directory without touching the catalog or the cache."""
    try:
        files = service.read_directory(directory)
    except NotFoundError as e:
        if as_json:
            return error("scan", str(e))
        print(f"Error: {e}")
        return 1

    if as_json:
        return success("scan", [
            {"filename": f.filename, "path": f.path, "index": f.index, "metadata": asdict(f.metadata)}
            for f in files
        ], meta={"directory": directory, "count": len(files)})

    print(f"{len(files)} images in {directory}")
    for f in files:
        meta = f.metadata
        note = f"  [degraded: {', '.join(sorted(meta.issues))}]" if meta.degraded else ""
        print(f"  {f.index:4d}  {f.filename:<32} {meta.width}x{meta.height} {meta.format}{note}")
    return 0


def cmd_compress(service: RollImageService, directory: str,
                 options: Optional[DeriveOptions] = None, as_json: bool = False) -> int:
    """Derive display renditions for every image of a directory."""
    mapping = service.batch_compress(directory, options)
    derived = sum(1 for orig, disp in mapping.items() if orig != disp)

    if as_json:
        return success("compress", mapping,
                       meta={"directory": directory, "count": len(mapping), "derived": derived})

    print(f"Derived {derived} of {len(mapping)} images")
    for orig, disp in mapping.items():
        print(f"  {orig} -> {disp if disp != orig else '(original)'}")
    return 0
