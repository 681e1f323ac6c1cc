"""Image rendition modules for the Roll Library."""

from .thumbnail import ThumbnailGenerator, render_placeholder
from .deriver import BatchDeriver

__all__ = ['ThumbnailGenerator', 'BatchDeriver', 'render_placeholder']
