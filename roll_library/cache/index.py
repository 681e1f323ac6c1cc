#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Per-roll derived image index for the Roll Library.

Each roll has one JSON file mapping original paths to derived paths. The index
is checked on every read and replaced as a whole whenever any derived file has
disappeared: a listing cannot tell a renamed source from a deleted one, so
individual entries are never repaired.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from ..config import INDEX_SUFFIX
from ..errors import PersistenceError
from ..imaging.deriver import BatchDeriver
from ..models.derivation import DeriveOptions
from ..utils.path import atomic_write_text, ensure_dir

logger = logging.getLogger(__name__)


class CacheState(str, Enum):
    ABSENT = "absent"
    VALID = "valid"
    STALE = "stale"


class DerivedImageCache:
    """Load, validate and rebuild the derived image index of a roll."""

    def __init__(self, index_dir: Path, deriver: BatchDeriver,
                 options: Optional[DeriveOptions] = None):
        self.index_dir = Path(index_dir)
        self.deriver = deriver
        self.options = options

    def index_path(self, roll_id: str) -> Path:
        return self.index_dir / f"{roll_id}{INDEX_SUFFIX}"

    def load(self, roll_id: str) -> Optional[Dict[str, str]]:
        """Return the persisted mapping, or None when there is no usable index.

        Any structure other than a flat object of strings is treated as absent.
        Raises PersistenceError when the file exists but cannot be read.
        """
        path = self.index_path(roll_id)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PersistenceError(f"Cannot read cache index {path}: {e}") from e

        try:
            data = json.loads(text)
        except ValueError:
            logger.warning("Cache index %s is not valid JSON, ignoring it", path)
            return None
        if not isinstance(data, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in data.items()):
            logger.warning("Cache index %s has an unexpected structure, ignoring it", path)
            return None
        return data

    def save(self, roll_id: str, mapping: Dict[str, str]) -> Path:
        """Atomically replace the roll's index with `mapping`."""
        path = self.index_path(roll_id)
        try:
            ensure_dir(self.index_dir)
            atomic_write_text(path, json.dumps(mapping))
        except OSError as e:
            raise PersistenceError(f"Cannot write cache index {path}: {e}") from e
        return path

    def invalidate(self, roll_id: str) -> bool:
        """Remove the roll's persisted index. Derived files are left in place."""
        path = self.index_path(roll_id)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise PersistenceError(f"Cannot remove cache index {path}: {e}") from e
        return True

    @staticmethod
    def missing_entries(mapping: Dict[str, str]) -> Dict[str, str]:
        """Entries whose display file no longer exists."""
        return {orig: derived for orig, derived in mapping.items() if not Path(derived).exists()}

    def state(self, roll_id: str) -> CacheState:
        try:
            mapping = self.load(roll_id)
        except PersistenceError:
            return CacheState.STALE
        if mapping is None:
            return CacheState.ABSENT
        return CacheState.STALE if self.missing_entries(mapping) else CacheState.VALID

    def get_or_build(self, roll_directory, roll_id: str) -> Dict[str, str]:
        """Return {original path: display path} for the roll, rebuilding if needed.

        A valid index is returned untouched. A missing, unreadable or stale one
        is rebuilt from a fresh scan of `roll_directory`. Write failures are
        logged and the rebuilt mapping is still returned.
        Raises NotFoundError when the roll directory cannot be listed.
        """
        try:
            mapping = self.load(roll_id)
        except PersistenceError as e:
            logger.error("%s; rebuilding in memory", e)
            mapping = None

        if mapping is None:
            logger.info("No cache index for roll %s, generating derived images", roll_id)
            return self._rebuild(roll_directory, roll_id)

        logger.debug("Loaded cache index for roll %s with %d entries", roll_id, len(mapping))
        missing = self.missing_entries(mapping)
        if missing:
            logger.info("Roll %s: %d derived images missing (e.g. %s), regenerating all",
                        roll_id, len(missing), next(iter(missing.values())))
            return self._rebuild(roll_directory, roll_id)

        return mapping

    def _rebuild(self, roll_directory, roll_id: str) -> Dict[str, str]:
        mapping = self.deriver.derive_directory(roll_directory, self.options)
        try:
            self.save(roll_id, mapping)
        except PersistenceError as e:
            logger.error("%s; continuing without a persisted index", e)
        return mapping
