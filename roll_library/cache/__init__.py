"""Derived-image cache for the Roll Library."""

from .index import DerivedImageCache, CacheState

__all__ = ['DerivedImageCache', 'CacheState']
