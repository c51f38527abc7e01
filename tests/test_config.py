"""
Tests for environment configuration loading
"""

import pytest

from foodgraph.config import Settings, get_settings, load_settings
from foodgraph.errors import StartupConfigError


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("PORT", "5055")

    settings = load_settings(_env_file=None)

    assert settings.node_env == "production"
    assert settings.port == 5055
    assert settings.is_production is True


def test_port_defaults_to_4000(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "development")
    monkeypatch.delenv("PORT", raising=False)

    settings = load_settings(_env_file=None)

    assert settings.port == 4000
    assert settings.is_production is False


def test_missing_node_env_is_a_startup_error(monkeypatch):
    monkeypatch.delenv("NODE_ENV", raising=False)

    with pytest.raises(StartupConfigError, match="NODE_ENV"):
        load_settings(_env_file=None)


@pytest.mark.parametrize("value", ["staging", "test", "", "Production "])
def test_node_env_outside_allowed_modes_is_rejected(monkeypatch, value):
    monkeypatch.setenv("NODE_ENV", value)

    with pytest.raises(StartupConfigError, match="NODE_ENV"):
        load_settings(_env_file=None)


def test_non_numeric_port_is_rejected(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "development")
    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(StartupConfigError, match="PORT"):
        load_settings(_env_file=None)


def test_get_settings_is_memoized(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "development")

    first = get_settings()
    monkeypatch.setenv("NODE_ENV", "production")

    assert get_settings() is first
    assert first.node_env == "development"


def test_settings_can_be_constructed_explicitly():
    settings = Settings(node_env="development", database_url="sqlite+aiosqlite://", _env_file=None)

    assert settings.database_url == "sqlite+aiosqlite://"
