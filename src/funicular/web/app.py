from __future__ import annotations

import logging

from flask import Flask

from funicular.catalog.handler import CatalogHandler
from funicular.config import FunicularConfig
from funicular.store.db import Database
from funicular.store.errors import StorageError
from funicular.store.migrations import run_migrations
from funicular.store.repositories import GameRepository
from funicular.stylesheet.resolver import Resolver

logger = logging.getLogger(__name__)


def create_app(
    db: Database | None = None,
    config: FunicularConfig | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    config = config or FunicularConfig()
    app = Flask(__name__)

    # Store db, handler and shared read-only state on app for access in routes
    if db is None:
        db = Database(config.db_path, timeout=config.db_timeout)
        db.connect()
        run_migrations(db)

    from funicular.web.assets import build_site_css

    resolver = Resolver(dark_mode=config.dark_mode)
    game_repo = GameRepository(db)

    app.extensions["config"] = config
    app.extensions["db"] = db
    app.extensions["game_repo"] = game_repo
    app.extensions["catalog"] = CatalogHandler(game_repo)
    app.extensions["resolver"] = resolver
    app.extensions["site_css"] = build_site_css(resolver)

    @app.errorhandler(StorageError)
    def storage_unavailable(exc: StorageError):
        logger.error("Storage failure: %s", exc)
        return "Service Unavailable", 503

    # Register blueprints
    from funicular.web.routes.assets import assets_bp
    from funicular.web.routes.games import games_bp
    from funicular.web.routes.home import home_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(games_bp)
    app.register_blueprint(assets_bp)

    return app
