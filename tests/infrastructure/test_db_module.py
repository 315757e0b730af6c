"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FLEET_DB_URL", "postgresql://fleet")

    assert db_module._get_env_var("FLEET_DB_URL") == "postgresql://fleet"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError naming the variable."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("FLEET_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="FLEET_DB_URL"):
        db_module._get_env_var("FLEET_DB_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure a pre-pinged QueuePool."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    assert db_module._create_engine("postgresql://fleet") == "engine"
    assert captured["db_url"] == "postgresql://fleet"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True


def test_get_fleet_engine_is_memoized(monkeypatch):
    """The fleet engine is created once per process."""
    monkeypatch.setattr(db_module, "_fleet_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FLEET_DB_URL", "sqlite:///fleet.db")

    first = db_module.get_fleet_engine()
    second = db_module.SqlAlchemyDatabaseEngineAdapter().get_fleet_engine()

    assert first == "engine:sqlite:///fleet.db"
    assert second is first
    assert created == ["sqlite:///fleet.db"]
