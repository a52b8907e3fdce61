"""Tests for the infrastructure.db module."""

import pytest

from depreciation_schedules.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("SNAPSHOT_DB_URL", "postgresql://example")

    assert db_module._get_env_var("SNAPSHOT_DB_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("SNAPSHOT_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("SNAPSHOT_DB_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://register")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://register"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True
    assert "connect_args" not in captured["kwargs"]


def test_create_engine_allows_sqlite_across_threads(monkeypatch):
    """SQLite engines should disable the same-thread check."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    db_module._create_engine("sqlite:///register.sqlite3")

    assert captured["connect_args"] == {"check_same_thread": False}
    assert captured["poolclass"] is db_module.QueuePool


def test_get_snapshot_engine_caches_adapter(monkeypatch):
    """get_snapshot_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_snapshot_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("SNAPSHOT_DB_URL", "postgresql://register")

    engine_one = db_module.get_snapshot_engine()
    engine_two = db_module.get_snapshot_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://register"
    assert created == ["postgresql://register"]


def test_snapshot_url_defaults_to_sqlite_file(monkeypatch, tmp_path):
    """Without SNAPSHOT_DB_URL the register lives in a local SQLite file."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("SNAPSHOT_DB_URL", raising=False)
    monkeypatch.setattr(db_module, "get_project_root", lambda: tmp_path)

    url = db_module._resolve_snapshot_db_url()

    assert url == f"sqlite:///{tmp_path / 'data' / 'depreciation_register.sqlite3'}"
    assert (tmp_path / "data").is_dir()


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(
        db_module,
        "get_snapshot_engine",
        lambda: "snapshot_engine",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_snapshot_engine() == "snapshot_engine"
