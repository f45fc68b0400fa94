"""Tests for environment-driven settings."""

from adiparse.config import Settings, get_settings


def test_defaults(monkeypatch):
    for key in ("ADIPARSE_API_BASE_URL", "ADIPARSE_NETWORK_NAME", "ADIPARSE_DEBUG"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_base_url == "https://localhost:7033"
    assert settings.api_provider == "Qoboto"
    assert settings.network_name == "mainnet"
    assert settings.cache_ttl_seconds == 300
    assert settings.http_timeout is None
    assert settings.development_mode is False


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("ADIPARSE_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("ADIPARSE_NETWORK_NAME", "kermit")
    monkeypatch.setenv("ADIPARSE_DEVELOPMENT_MODE", "true")
    monkeypatch.setenv("ADIPARSE_HTTP_TIMEOUT", "2.5")

    settings = Settings(_env_file=None)

    assert settings.api_base_url == "https://api.example.com"
    assert settings.network_name == "kermit"
    assert settings.development_mode is True
    assert settings.http_timeout == 2.5


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
