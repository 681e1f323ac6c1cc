"""CLI command implementations for the Roll Library."""

from .images import cmd_images, cmd_scan, cmd_compress
from .rolls import (
    cmd_add_roll, cmd_list_rolls, cmd_remove_roll, cmd_thumbnail, cmd_cleanup_thumbnails
)

__all__ = [
    'cmd_images',
    'cmd_scan',
    'cmd_compress',
    'cmd_add_roll',
    'cmd_list_rolls',
    'cmd_remove_roll',
    'cmd_thumbnail',
    'cmd_cleanup_thumbnails',
]
