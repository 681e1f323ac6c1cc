#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exception types for the Roll Library.
"""


class RollLibraryError(Exception):
    """Base class for all errors raised by the Roll Library."""


class NotFoundError(RollLibraryError):
    """A roll directory or a required source file is missing or unreadable."""


class MetadataError(RollLibraryError):
    """One metadata extraction step failed. Never leaves the extractor."""

    def __init__(self, step: str, message: str):
        super().__init__(f"{step}: {message}")
        self.step = step
        self.message = message


class GenerationError(RollLibraryError):
    """A thumbnail or derived rendition could not be produced."""


class PersistenceError(RollLibraryError):
    """The per-roll cache index could not be read or written."""
