"""Request-level services for the Roll Library."""

from .assembler import ViewAssembler
from .rolls import RollImageService

__all__ = ['ViewAssembler', 'RollImageService']
