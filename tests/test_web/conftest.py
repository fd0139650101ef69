from __future__ import annotations

import pytest

from funicular.config import FunicularConfig
from funicular.store.db import Database
from funicular.store.migrations import run_migrations
from funicular.web.app import create_app


@pytest.fixture
def db():
    """Create a fresh in-memory database with migrations for each test."""
    database = Database(":memory:")
    database.connect()
    run_migrations(database)
    yield database
    database.close()


@pytest.fixture
def config():
    return FunicularConfig()


@pytest.fixture
def app(db, config):
    """Create a Flask app for testing."""
    application = create_app(db=db, config=config)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def seed_game(app):
    """Insert a game directly through the repository and return it."""

    def _seed(name: str = "Chess", description: str = ""):
        return app.extensions["game_repo"].create(name, description)

    return _seed
