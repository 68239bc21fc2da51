"""
Tests for config.py environment parsing.
"""

import importlib
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402


@pytest.fixture
def reload_config(monkeypatch):
    # Keep a stray .env file from leaking into these tests
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: False)

    def _reload():
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:
    """Tests for environment-backed settings."""

    def test_defaults(self, monkeypatch, reload_config):
        monkeypatch.delenv("SNAKE_TICK_PERIOD_MS", raising=False)
        monkeypatch.delenv("SNAKE_LOG_LEVEL", raising=False)
        cfg = reload_config()
        assert cfg.TICK_PERIOD_MS == 150
        assert cfg.LOG_LEVEL == "INFO"

    def test_overrides(self, monkeypatch, reload_config):
        monkeypatch.setenv("SNAKE_TICK_PERIOD_MS", "40")
        monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
        cfg = reload_config()
        assert cfg.TICK_PERIOD_MS == 40
        assert cfg.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("raw", ["fast", "0", "-5"])
    def test_invalid_tick_period(self, monkeypatch, reload_config, raw):
        monkeypatch.setenv("SNAKE_TICK_PERIOD_MS", raw)
        with pytest.raises(ValueError, match="SNAKE_TICK_PERIOD_MS"):
            reload_config()
