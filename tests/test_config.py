import pytest
from pydantic import ValidationError

from landscout.adapters.config import AppConfig


def test_defaults(monkeypatch):
    for key in ("LANDSCOUT_LOG_LEVEL", "LANDSCOUT_STORE_PATH", "LANDSCOUT_SEED_SAMPLE_PINS"):
        monkeypatch.delenv(key, raising=False)

    cfg = AppConfig()

    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.STORE_PATH == "land_pins.json"
    assert cfg.SEED_SAMPLE_PINS is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LANDSCOUT_LOG_LEVEL", "debug")
    monkeypatch.setenv("LANDSCOUT_STORE_PATH", " /tmp/pins.json ")
    monkeypatch.setenv("LANDSCOUT_SEED_SAMPLE_PINS", "false")

    cfg = AppConfig()

    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.STORE_PATH == "/tmp/pins.json"
    assert cfg.SEED_SAMPLE_PINS is False


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LANDSCOUT_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        AppConfig()
