"""
Tests for the foodgraph command line
"""

from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner
from fastapi import FastAPI

from foodgraph import __version__
from foodgraph.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def uvicorn_run(monkeypatch):
    run = MagicMock()
    monkeypatch.setattr("foodgraph.cli.uvicorn.run", run)
    return run


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


class TestServe:
    """Tests for the serve command."""

    def test_refuses_to_start_without_node_env(self, runner, uvicorn_run, monkeypatch):
        monkeypatch.delenv("NODE_ENV", raising=False)

        result = runner.invoke(cli, ["serve"])

        assert result.exit_code == 1
        uvicorn_run.assert_not_called()

    def test_refuses_to_start_with_unknown_node_env(self, runner, uvicorn_run, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "staging")

        result = runner.invoke(cli, ["serve"])

        assert result.exit_code == 1
        uvicorn_run.assert_not_called()

    def test_serves_on_port_from_environment(self, runner, uvicorn_run, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "production")
        monkeypatch.setenv("PORT", "5055")

        result = runner.invoke(cli, ["serve"])

        assert result.exit_code == 0
        uvicorn_run.assert_called_once()
        app = uvicorn_run.call_args.args[0]
        assert isinstance(app, FastAPI)
        assert uvicorn_run.call_args.kwargs["port"] == 5055
        assert uvicorn_run.call_args.kwargs["host"] == "0.0.0.0"

    def test_default_port(self, runner, uvicorn_run, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "development")
        monkeypatch.delenv("PORT", raising=False)

        result = runner.invoke(cli, ["serve"])

        assert result.exit_code == 0
        assert uvicorn_run.call_args.kwargs["port"] == 4000

    def test_options_override_environment(self, runner, uvicorn_run, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "development")
        monkeypatch.setenv("PORT", "5055")

        result = runner.invoke(
            cli, ["serve", "--host", "127.0.0.1", "--port", "6000", "--log-level", "debug"]
        )

        assert result.exit_code == 0
        kwargs = uvicorn_run.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 6000
        assert kwargs["log_level"] == "debug"

    def test_reload_uses_app_factory(self, runner, uvicorn_run, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "development")

        result = runner.invoke(cli, ["serve", "--reload", "--port", "7000"])

        assert result.exit_code == 0
        args, kwargs = uvicorn_run.call_args
        assert args == ("foodgraph.api.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["reload"] is True
        assert kwargs["port"] == 7000


def test_schema_prints_sdl(runner):
    result = runner.invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Query" in result.output
    assert "getFoodByName(name: String!): [Food]!" in result.output
    assert "input PrismaQueryOptions" in result.output
