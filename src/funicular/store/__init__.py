from __future__ import annotations

from funicular.store.db import Database
from funicular.store.errors import StorageError
from funicular.store.migrations import run_migrations
from funicular.store.repositories import GameRepository

__all__ = [
    "Database",
    "StorageError",
    "run_migrations",
    "GameRepository",
]
