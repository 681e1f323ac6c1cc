"""Roll Library - scanned film roll browsing with a derived image cache."""

__version__ = "1.0.0"
__author__ = "Roll Library Team"

# Import key classes for convenient top-level access
from .config import LibraryConfig
from .errors import RollLibraryError, NotFoundError, MetadataError, GenerationError, PersistenceError
from .scanning import DirectoryScanner, MetadataExtractor
from .imaging import ThumbnailGenerator, BatchDeriver
from .cache import DerivedImageCache, CacheState
from .catalog import SQLiteRollCatalog
from .service import RollImageService, ViewAssembler
from .models import (
    ImageMetadata, SourceImageFile, DeriveOptions, DerivationOutcome,
    ViewImageRecord, RollImagesResult, Roll
)

__all__ = [
    # Configuration
    'LibraryConfig',

    # Errors
    'RollLibraryError',
    'NotFoundError',
    'MetadataError',
    'GenerationError',
    'PersistenceError',

    # Pipeline components
    'DirectoryScanner',
    'MetadataExtractor',
    'ThumbnailGenerator',
    'BatchDeriver',
    'DerivedImageCache',
    'CacheState',
    'ViewAssembler',
    'RollImageService',
    'SQLiteRollCatalog',

    # Data models
    'ImageMetadata',
    'SourceImageFile',
    'DeriveOptions',
    'DerivationOutcome',
    'ViewImageRecord',
    'RollImagesResult',
    'Roll',

    # Package metadata
    '__version__',
    '__author__'
]
