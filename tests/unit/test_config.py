"""Unit tests for configuration."""

import importlib

from config import Settings
from services.brand_detection import config as detection_config


def test_default_settings(monkeypatch):
    """Test that default settings are loaded correctly."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    settings = Settings()

    assert settings.app_name == "BrandLens"
    assert settings.debug is False
    assert settings.default_strategy == "both"
    assert settings.discovery_provider == "ollama"
    assert settings.ollama_base_url == "http://localhost:11434"
    assert settings.openai_api_key is None


def test_custom_settings(monkeypatch):
    """Test that custom settings can be loaded from environment."""
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("DEBUG", "True")
    monkeypatch.setenv("DISCOVERY_PROVIDER", "openai")
    monkeypatch.setenv("DISCOVERY_TIMEOUT_SECONDS", "3.5")

    settings = Settings()

    assert settings.app_name == "TestApp"
    assert settings.debug is True
    assert settings.discovery_provider == "openai"
    assert settings.discovery_timeout_seconds == 3.5


def test_feature_flags_read_environment(monkeypatch):
    monkeypatch.setenv("ENABLE_MODEL_DISCOVERY", "TRUE")
    monkeypatch.setenv("ENABLE_TEXT_PREPROCESSING", "no")
    monkeypatch.setenv("DISCOVERY_CONFIDENCE_THRESHOLD", "0.9")
    try:
        reloaded = importlib.reload(detection_config)

        assert reloaded.ENABLE_MODEL_DISCOVERY is True
        assert reloaded.ENABLE_TEXT_PREPROCESSING is False
        assert reloaded.DISCOVERY_CONFIDENCE_THRESHOLD == 0.9
    finally:
        monkeypatch.undo()
        importlib.reload(detection_config)
