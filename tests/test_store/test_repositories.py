from __future__ import annotations

import sqlite3

import pytest

from funicular.model.game import Game, slugify
from funicular.store.db import Database
from funicular.store.errors import StorageError
from funicular.store.migrations import run_migrations
from funicular.store.repositories import GameRepository, _row_to_game, new_slug


@pytest.fixture
def db() -> Database:
    """Create a fresh in-memory database with migrations for each test."""
    database = Database(":memory:")
    database.connect()
    run_migrations(database)
    yield database
    database.close()


@pytest.fixture
def repo(db: Database) -> GameRepository:
    return GameRepository(db)


class TestSlugs:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Chess", "chess"),
            ("Ticket to Ride!", "ticket-to-ride"),
            ("  Café  Noir ", "cafe-noir"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, name: str, expected: str) -> None:
        assert slugify(name) == expected

    def test_new_slug_has_suffix(self) -> None:
        slug = new_slug("Chess")
        assert slug.startswith("chess-")
        assert len(slug) == len("chess-") + 6

    def test_new_slug_for_unsluggable_name(self) -> None:
        assert new_slug("???").startswith("game-")

    def test_new_slugs_are_unique(self) -> None:
        assert new_slug("Go") != new_slug("Go")

    def test_game_requires_slug(self) -> None:
        with pytest.raises(ValueError):
            Game(slug="", name="x")

    def test_game_href(self) -> None:
        assert Game(slug="chess-abc123", name="Chess").href == "/games/chess-abc123"


class TestCreateAndRead:
    def test_create_returns_game(self, repo: GameRepository) -> None:
        game = repo.create("Chess", "Two players")
        assert game.name == "Chess"
        assert game.description == "Two players"
        assert game.slug.startswith("chess-")

    def test_get(self, repo: GameRepository) -> None:
        game = repo.create("Chess", "Two players")
        assert repo.get(game.slug) == game

    def test_get_missing(self, repo: GameRepository) -> None:
        assert repo.get("nope") is None

    def test_list_all_in_insertion_order(self, repo: GameRepository) -> None:
        names = ["Go", "Chess", "Backgammon"]
        for name in names:
            repo.create(name)
        assert [g.name for g in repo.list_all()] == names

    def test_list_all_empty(self, repo: GameRepository) -> None:
        assert repo.list_all() == ()

    def test_description_optional(self, repo: GameRepository) -> None:
        game = repo.create("Go")
        assert repo.get(game.slug).description == ""

    def test_count(self, repo: GameRepository) -> None:
        repo.create("Go")
        repo.create("Chess")
        assert repo.count() == 2


class TestDelete:
    def test_delete_many(self, repo: GameRepository) -> None:
        go = repo.create("Go")
        chess = repo.create("Chess")
        repo.create("Backgammon")
        assert repo.delete_many([go.slug, chess.slug]) == 2
        assert [g.name for g in repo.list_all()] == ["Backgammon"]

    def test_delete_many_empty_is_noop(self, repo: GameRepository) -> None:
        repo.create("Go")
        assert repo.delete_many([]) == 0
        assert repo.count() == 1

    def test_delete_many_unknown_slug_is_noop(self, repo: GameRepository) -> None:
        repo.create("Go")
        assert repo.delete_many(["missing"]) == 0
        assert repo.count() == 1

    def test_delete_many_ignores_duplicates(self, repo: GameRepository) -> None:
        go = repo.create("Go")
        assert repo.delete_many([go.slug, go.slug]) == 1

    def test_delete_all(self, repo: GameRepository) -> None:
        repo.create("Go")
        repo.create("Chess")
        assert repo.delete_all() == 2
        assert repo.list_all() == ()


class TestRowMapping:
    def test_full_row(self, db: Database, repo: GameRepository) -> None:
        game = repo.create("Chess", "Two players")
        row = db.fetch_one("SELECT * FROM game WHERE slug = ?", (game.slug,))
        assert isinstance(row, sqlite3.Row)
        assert _row_to_game(row) == game

    def test_row_without_description_column(self, db: Database, repo: GameRepository) -> None:
        game = repo.create("Go", "Stones")
        row = db.fetch_one("SELECT slug, name FROM game WHERE slug = ?", (game.slug,))
        assert _row_to_game(row) == Game(slug=game.slug, name="Go")


class TestFailures:
    def test_list_on_closed_database_raises(self, db: Database, repo: GameRepository) -> None:
        db.close()
        with pytest.raises(StorageError):
            repo.list_all()
