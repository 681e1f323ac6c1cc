import sqlite3
from pathlib import Path

from ..utils.path import ensure_dir
from .schema import MAIN_SCHEMA


def init_db_if_needed(db_path: Path):
    db_path = Path(db_path)
    ensure_dir(db_path.parent)
    conn = sqlite3.connect(str(db_path))
    try:
        conn.execute("PRAGMA foreign_keys=ON;")
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA synchronous=NORMAL;")
        conn.executescript(MAIN_SCHEMA)
        conn.commit()
    finally:
        conn.close()
