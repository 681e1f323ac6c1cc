#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Database schema definitions for the Roll Library catalog.
"""

MAIN_SCHEMA = """
PRAGMA journal_mode=WAL;
PRAGMA foreign_keys=ON;

CREATE TABLE IF NOT EXISTS rolls (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    path TEXT NOT NULL,
    image_count INTEGER NOT NULL DEFAULT 0,
    thumbnail_path TEXT,
    date_imported TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_rolls_path ON rolls(path);
"""
