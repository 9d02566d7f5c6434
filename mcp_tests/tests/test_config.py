import importlib

import config


def _reload(monkeypatch, **env):
    for name in ("DEFAULT_RETENTION_MILLIS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return importlib.reload(config)


def test_defaults(monkeypatch):
    cfg = _reload(monkeypatch)

    assert cfg.DEFAULT_RETENTION_MILLIS == 60_000
    assert cfg.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    cfg = _reload(monkeypatch, DEFAULT_RETENTION_MILLIS=" 2500 ", LOG_LEVEL="debug")

    assert cfg.DEFAULT_RETENTION_MILLIS == 2500
    assert cfg.LOG_LEVEL == "DEBUG"


def test_invalid_int_falls_back(monkeypatch):
    cfg = _reload(monkeypatch, DEFAULT_RETENTION_MILLIS="soon", LOG_LEVEL="  ")

    assert cfg.DEFAULT_RETENTION_MILLIS == 60_000
    assert cfg.LOG_LEVEL == "INFO"
    _reload(monkeypatch)
