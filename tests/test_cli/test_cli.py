"""Tests for the Funicular CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from funicular.cli.main import cli
from funicular.store.db import Database
from funicular.store.repositories import GameRepository


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "games catalog" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        for command in ("serve", "init-db", "add", "build-css"):
            assert command in result.output


class TestServeCommand:
    def test_serve_help_shows_options(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "Start the Funicular web server" in result.output
        assert "--port" in result.output
        assert "--inline-css" in result.output


# ---------------------------------------------------------------------------
# Database commands
# ---------------------------------------------------------------------------


class TestInitDb:
    def test_creates_schema(self, tmp_path) -> None:
        db_path = tmp_path / "games.db"
        runner = CliRunner()
        result = runner.invoke(cli, ["init-db", "--db", str(db_path)])
        assert result.exit_code == 0
        assert "Initialized" in result.output

        database = Database(str(db_path))
        database.connect()
        assert GameRepository(database).list_all() == ()
        database.close()

    def test_accepts_sqlite_url(self, tmp_path) -> None:
        db_path = tmp_path / "games.db"
        runner = CliRunner()
        result = runner.invoke(cli, ["init-db", "--db", f"sqlite:///{db_path}"])
        assert result.exit_code == 0
        assert db_path.exists()


class TestAdd:
    def test_add_game(self, tmp_path) -> None:
        db_path = tmp_path / "games.db"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["add", "--name", "Chess", "--description", "desc", "--db", str(db_path)]
        )
        assert result.exit_code == 0
        assert "Game added: chess-" in result.output

        database = Database(str(db_path))
        database.connect()
        games = GameRepository(database).list_all()
        database.close()
        assert [g.name for g in games] == ["Chess"]

    def test_name_required(self, tmp_path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "--db", str(tmp_path / "x.db")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# build-css
# ---------------------------------------------------------------------------


class TestBuildCss:
    def test_writes_to_stdout(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build-css"])
        assert result.exit_code == 0
        assert ".flex{display:flex;}" in result.output
        assert "(prefers-color-scheme: dark)" in result.output

    def test_writes_file(self, tmp_path) -> None:
        output = tmp_path / "site.css"
        runner = CliRunner()
        result = runner.invoke(cli, ["build-css", "--output", str(output)])
        assert result.exit_code == 0
        css = output.read_text(encoding="utf-8")
        assert ".sm\\:flex-row" in css
        assert f"Wrote {len(css.splitlines())} rules" in result.output

    def test_class_dark_mode(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build-css", "--dark-mode", "class"])
        assert result.exit_code == 0
        assert ".dark .dark\\:bg-slate-900" in result.output

    def test_rejects_unknown_dark_mode(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build-css", "--dark-mode", "auto"])
        assert result.exit_code != 0
