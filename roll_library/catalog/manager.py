# roll_library/catalog/manager.py
import logging
import sqlite3
import uuid
from pathlib import Path
from typing import List, Optional

from ..models.roll import Roll
from ..utils.time import utc_now_str
from .init import init_db_if_needed

logger = logging.getLogger(__name__)

_ROLL_COLUMNS = "id, name, path, image_count, thumbnail_path, date_imported"


class SQLiteRollCatalog:
    """Minimal SQLite roll table implementing the RollCatalog protocol."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        init_db_if_needed(self.db_path)
        # Commands may run on a worker thread when --timeout is given
        self.conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        # Pragmas for performance & integrity
        self.conn.execute("PRAGMA foreign_keys=ON;")
        self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.execute("PRAGMA synchronous=NORMAL;")

    def get_connection(self):
        return self.conn

    def close(self) -> None:
        self.conn.close()

    def add_roll(self, name: str, path: str, image_count: int = 0,
                 thumbnail_path: Optional[str] = None) -> Roll:
        roll = Roll(
            id=str(uuid.uuid4()),
            name=name,
            path=str(path),
            image_count=image_count,
            thumbnail_path=thumbnail_path,
            date_imported=utc_now_str(),
        )
        with self.conn:
            self.conn.execute(
                f"INSERT INTO rolls ({_ROLL_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                (roll.id, roll.name, roll.path, roll.image_count,
                 roll.thumbnail_path, roll.date_imported),
            )
        logger.info("Added roll %s (%s)", roll.id, roll.name)
        return roll

    def get_roll(self, roll_id: str) -> Optional[Roll]:
        row = self.conn.execute(
            f"SELECT {_ROLL_COLUMNS} FROM rolls WHERE id = ?", (roll_id,)
        ).fetchone()
        return Roll(*row) if row else None

    def list_rolls(self) -> List[Roll]:
        rows = self.conn.execute(
            f"SELECT {_ROLL_COLUMNS} FROM rolls ORDER BY date_imported DESC"
        ).fetchall()
        return [Roll(*row) for row in rows]

    def update_image_count(self, roll_id: str, image_count: int) -> bool:
        with self.conn:
            cur = self.conn.execute(
                "UPDATE rolls SET image_count = ? WHERE id = ?", (image_count, roll_id)
            )
        return cur.rowcount > 0

    def update_thumbnail(self, roll_id: str, thumbnail_path: str) -> bool:
        with self.conn:
            cur = self.conn.execute(
                "UPDATE rolls SET thumbnail_path = ? WHERE id = ?", (thumbnail_path, roll_id)
            )
        return cur.rowcount > 0

    def delete_roll(self, roll_id: str) -> bool:
        with self.conn:
            cur = self.conn.execute("DELETE FROM rolls WHERE id = ?", (roll_id,))
        return cur.rowcount > 0

    def list_thumbnail_paths(self) -> List[str]:
        rows = self.conn.execute(
            "SELECT thumbnail_path FROM rolls WHERE thumbnail_path IS NOT NULL"
        ).fetchall()
        return [r[0] for r in rows]
