"""Funicular CLI entry point."""
from __future__ import annotations

import logging

import click

from funicular.config import FunicularConfig, db_path_from_url


@click.group()
def cli():
    """Funicular: games catalog with on-demand utility CSS."""
    pass


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--db", default=None, help="Database path or sqlite:/// URL")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
@click.option(
    "--inline-css/--linked-css",
    default=None,
    help="Inline each page's stylesheet instead of linking /site.css",
)
def serve(
    host: str | None,
    port: int | None,
    db: str | None,
    debug: bool,
    inline_css: bool | None,
) -> None:
    """Start the Funicular web server."""
    from dataclasses import replace

    from funicular.store.db import Database
    from funicular.store.migrations import run_migrations
    from funicular.web.app import create_app

    config = FunicularConfig.from_env()
    overrides = {
        "host": host,
        "port": port,
        "db_path": db_path_from_url(db) if db else None,
        "inline_css": inline_css,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    database = Database(config.db_path, timeout=config.db_timeout)
    database.connect()
    run_migrations(database)

    app = create_app(db=database, config=config)
    click.echo(f"Starting Funicular on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)


@cli.command("init-db")
@click.option("--db", default="funicular.db", help="Database path or sqlite:/// URL")
def init_db(db: str) -> None:
    """Create the catalog schema."""
    from funicular.store.db import Database
    from funicular.store.migrations import run_migrations

    database = Database(db_path_from_url(db))
    database.connect()
    run_migrations(database)
    database.close()

    click.echo(f"Initialized {database.path}")


@cli.command()
@click.option("--name", required=True, help="Game name")
@click.option("--description", default="", help="Game description")
@click.option("--db", default="funicular.db", help="Database path or sqlite:/// URL")
def add(name: str, description: str, db: str) -> None:
    """Add a game to the catalog."""
    from funicular.store.db import Database
    from funicular.store.migrations import run_migrations
    from funicular.store.repositories import GameRepository

    database = Database(db_path_from_url(db))
    database.connect()
    run_migrations(database)

    game = GameRepository(database).create(name, description)
    database.close()

    click.echo(f"Game added: {game.slug}")


@cli.command("build-css")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="File to write (default: stdout)",
)
@click.option(
    "--dark-mode",
    type=click.Choice(["media", "class"]),
    default="media",
    help="How dark: utilities are expressed",
)
def build_css(output: str | None, dark_mode: str) -> None:
    """Write the precomputed site stylesheet."""
    from pathlib import Path

    from funicular.stylesheet.resolver import Resolver
    from funicular.web.assets import build_site_css

    css = build_site_css(Resolver(dark_mode=dark_mode))
    if output is None:
        click.echo(css, nl=False)
        return
    Path(output).write_text(css, encoding="utf-8")
    click.echo(f"Wrote {len(css.splitlines())} rules to {output}")
