#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Roll catalog and thumbnail commands for the Roll Library.
"""


from ..errors import NotFoundError
from ..jsonio import error, success
from ..service.rolls import RollImageService


def cmd_add_roll(service: RollImageService, name: str, directory: str, as_json: bool = False) -> int:
    """Import a directory as a new roll."""
    try:
        roll = service.import_roll(name, directory)
    except NotFoundError as e:
        if as_json:
            return error("add-roll", str(e))
        print(f"Error: {e}")
        return 1

    if as_json:
        return success("add-roll", roll.to_dict())
    print(f"Added roll {roll.id}: {roll.name} ({roll.image_count} images)")
    print(f"  Thumbnail: {roll.thumbnail_path}")
    return 0


def cmd_list_rolls(service: RollImageService, as_json: bool = False) -> int:
    rolls = service.catalog.list_rolls()
    if as_json:
        return success("list-rolls", [r.to_dict() for r in rolls], meta={"count": len(rolls)})
    if not rolls:
        print("No rolls found.")
        return 0
    print("Rolls:")
    for r in rolls:
        print(f"  {r.id}  {r.name:<24} {r.image_count:5d} images  {r.path}")
    return 0


def cmd_remove_roll(service: RollImageService, roll_id: str, as_json: bool = False) -> int:
    removed = service.remove_roll(roll_id)
    if as_json:
        if not removed:
            return error("remove-roll", f"Roll not found: {roll_id}")
        return success("remove-roll", {"roll_id": roll_id})
    if not removed:
        print(f"Roll {roll_id} not found.")
        return 1
    print(f"Removed roll {roll_id}")
    return 0


def cmd_thumbnail(service: RollImageService, source: str, size: int = None, as_json: bool = False) -> int:
    """Generate a roll thumbnail, falling back to the default asset."""
    path = service.generate_thumbnail(source, size)
    is_default = path == str(service.config.default_thumbnail)
    if as_json:
        return success("thumbnail", {"path": path, "is_default": is_default})
    print(path + ("  (default)" if is_default else ""))
    return 0


def cmd_cleanup_thumbnails(service: RollImageService, as_json: bool = False) -> int:
    deleted = service.cleanup_thumbnails()
    if as_json:
        return success("cleanup-thumbnails", {"deleted": deleted})
    print(f"Removed {deleted} unused thumbnails.")
    return 0
