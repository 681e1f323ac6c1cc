"""Roll catalog collaborator for the Roll Library."""

from .base import RollCatalog
from .manager import SQLiteRollCatalog
from .init import init_db_if_needed

__all__ = ['RollCatalog', 'SQLiteRollCatalog', 'init_db_if_needed']
