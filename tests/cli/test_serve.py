"""
Tests for serve command.
"""

from unittest.mock import patch

from click.testing import CliRunner
from fastapi import FastAPI

from mdb_users.cli import cli


class TestServeCommand:
    def test_serve_runs_uvicorn(self, monkeypatch):
        monkeypatch.delenv("MONGOURI", raising=False)
        runner = CliRunner()

        with patch("mdb_users.cli.commands.serve.uvicorn.run") as run, patch(
            "mdb_users.cli.commands.serve.configure_logging"
        ):
            result = runner.invoke(
                cli,
                ["serve", "--mongo-uri", "mongodb://localhost:27017", "--port", "9000"],
            )

        assert result.exit_code == 0, result.output
        app = run.call_args.args[0]
        assert isinstance(app, FastAPI)
        assert app.state.config.mongo_uri == "mongodb://localhost:27017"
        assert run.call_args.kwargs["port"] == 9000

    def test_serve_requires_mongo_uri(self, monkeypatch):
        monkeypatch.delenv("MONGOURI", raising=False)
        monkeypatch.delenv("MONGO_URI", raising=False)
        runner = CliRunner()

        with patch("mdb_users.config.load_dotenv"), patch(
            "mdb_users.cli.commands.serve.uvicorn.run"
        ) as run:
            result = runner.invoke(cli, ["serve"])

        assert result.exit_code != 0
        assert "mongo_uri is required" in result.output
        run.assert_not_called()

    def test_serve_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        runner = CliRunner()

        with patch("mdb_users.cli.commands.serve.uvicorn.run") as run, patch(
            "mdb_users.cli.commands.serve.configure_logging"
        ) as configure:
            result = runner.invoke(
                cli,
                ["serve", "--mongo-uri", "mongodb://localhost:27017", "--log-level", "verbose"],
            )

        assert result.exit_code != 0
        assert not isinstance(result.exception, KeyError)
        assert "log_level must be one of" in result.output
        configure.assert_not_called()
        run.assert_not_called()

    def test_serve_passes_lowercase_level_to_uvicorn(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        runner = CliRunner()

        with patch("mdb_users.cli.commands.serve.uvicorn.run") as run, patch(
            "mdb_users.cli.commands.serve.configure_logging"
        ):
            result = runner.invoke(
                cli,
                ["serve", "--mongo-uri", "mongodb://localhost:27017", "--log-level", "Warning"],
            )

        assert result.exit_code == 0, result.output
        assert run.call_args.kwargs["log_level"] == "warning"

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "mdb-users" in result.output
