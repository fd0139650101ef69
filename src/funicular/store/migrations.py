from __future__ import annotations

from funicular.store.db import Database

SCHEMA = """
CREATE TABLE IF NOT EXISTS game (
    slug TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT ''
);
"""


def run_migrations(db: Database) -> None:
    """Create all tables."""
    db.executescript(SCHEMA)
    db.commit()
