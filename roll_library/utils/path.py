#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Path utility functions for the Roll Library.
"""

import os
import tempfile
from pathlib import Path


def ensure_dir(p: Path) -> None:
    """Ensure directory exists, creating it if necessary."""
    Path(p).mkdir(parents=True, exist_ok=True)


def atomic_write_text(target: Path, text: str, encoding: str = "utf-8") -> None:
    """Replace `target` with `text` in one step.

    The content goes to a temporary file in the same directory first, so readers
    see either the old file or the new one, never a partial write.
    """
    target = Path(target)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(text)
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
