from __future__ import annotations

import sqlite3
import uuid
from collections.abc import Iterable

from funicular.model.game import Game, slugify
from funicular.store.db import Database


class GameRepository:
    """Repository for Game persistence.

    Every method is a single statement committed on its own.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    def create(self, name: str, description: str = "") -> Game:
        """Insert a new game and return it with its generated slug."""
        game = Game(slug=new_slug(name), name=name, description=description)
        self._db.execute(
            "INSERT INTO game (slug, name, description) VALUES (?, ?, ?)",
            (game.slug, game.name, game.description),
        )
        self._db.commit()
        return game

    def get(self, slug: str) -> Game | None:
        """Retrieve a game by slug, or None if not found."""
        row = self._db.fetch_one(
            "SELECT slug, name, description FROM game WHERE slug = ?", (slug,)
        )
        if row is None:
            return None
        return _row_to_game(row)

    def list_all(self) -> tuple[Game, ...]:
        """List every game in storage order."""
        rows = self._db.fetch_all("SELECT slug, name FROM game")
        return tuple(_row_to_game(r) for r in rows)

    def delete_all(self) -> int:
        """Delete every game; return the number of rows removed."""
        cursor = self._db.execute("DELETE FROM game")
        self._db.commit()
        return cursor.rowcount

    def delete_many(self, slugs: Iterable[str]) -> int:
        """Delete the games with the given slugs; unknown slugs are ignored."""
        unique = tuple(dict.fromkeys(slugs))
        if not unique:
            return 0
        placeholders = ", ".join("?" for _ in unique)
        cursor = self._db.execute(
            f"DELETE FROM game WHERE slug IN ({placeholders})",  # noqa: S608
            unique,
        )
        self._db.commit()
        return cursor.rowcount

    def count(self) -> int:
        """Return the total number of games."""
        row = self._db.fetch_one("SELECT COUNT(*) as cnt FROM game")
        assert row is not None
        return row["cnt"]


def new_slug(name: str) -> str:
    """Build a unique slug: the slugified name plus a short random suffix."""
    base = slugify(name) or "game"
    return f"{base}-{uuid.uuid4().hex[:6]}"


def _row_to_game(row: sqlite3.Row) -> Game:
    return Game(
        slug=row["slug"],
        name=row["name"],
        description=row["description"] if "description" in row.keys() else "",
    )
