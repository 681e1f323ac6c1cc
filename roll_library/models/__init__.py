"""Data models for the Roll Library."""

from .image import ImageMetadata, SourceImageFile
from .derivation import DeriveOptions, DerivationOutcome
from .view import ViewImageRecord, RollImagesResult
from .roll import Roll

__all__ = [
    'ImageMetadata',
    'SourceImageFile',
    'DeriveOptions',
    'DerivationOutcome',
    'ViewImageRecord',
    'RollImagesResult',
    'Roll',
]
