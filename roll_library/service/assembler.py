#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Builds the view records returned for a roll.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..catalog.base import RollCatalog
from ..models.image import SourceImageFile
from ..models.roll import Roll
from ..models.view import ViewImageRecord
from ..utils.time import utc_now_str

logger = logging.getLogger(__name__)


class ViewAssembler:
    """Merge scanned files with the derived-image mapping."""

    def __init__(self, catalog: Optional[RollCatalog] = None):
        self.catalog = catalog

    def assemble(self, roll_id: str, files: Sequence[SourceImageFile],
                 mapping: Dict[str, str]) -> List[ViewImageRecord]:
        records = []
        for image in files:
            display = mapping.get(image.path, image.path)
            meta = image.metadata
            records.append(ViewImageRecord(
                id=f"{roll_id}_{image.index}",
                roll_id=roll_id,
                filename=image.filename,
                path=display,
                original_path=image.path,
                index_in_roll=image.index,
                width=meta.width or 0,
                height=meta.height or 0,
                format=meta.format or "",
                file_size=meta.size or 0,
                date_modified=meta.date_modified or utc_now_str(),
                is_compressed=display != image.path,
            ))
        return records

    def reconcile_image_count(self, roll: Roll, observed: int) -> bool:
        """Push the observed count to the catalog when it differs. Never raises."""
        if self.catalog is None or roll.image_count == observed:
            return False
        logger.info("Updating roll %s image count from %s to %d", roll.id, roll.image_count, observed)
        try:
            updated = self.catalog.update_image_count(roll.id, observed)
        except Exception as e:
            logger.warning("Could not update image count for roll %s: %s", roll.id, e)
            return False
        if updated:
            roll.image_count = observed
        return updated
