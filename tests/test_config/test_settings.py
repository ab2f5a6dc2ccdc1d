"""Testes para kick_api.config.settings."""

from __future__ import annotations

import pytest

from kick_api.config.settings import KickSettings, get_kick_settings
from kick_api.config.settings.kick import _load_from_env
from kick_api.constants import KICK_API_BASE_URL, KICK_OAUTH_BASE_URL


@pytest.fixture(autouse=True)
def _clear_cache():
    get_kick_settings.cache_clear()
    yield
    get_kick_settings.cache_clear()


def test_defaults_point_to_public_api() -> None:
    settings = KickSettings()
    assert settings.api_base_url == KICK_API_BASE_URL
    assert settings.oauth_base_url == KICK_OAUTH_BASE_URL
    assert settings.webhook_port == 3000
    assert settings.webhook_path == "/"


def test_api_url_joins_without_double_slash() -> None:
    settings = KickSettings(api_base_url="https://api.kick.test/public/v1/")
    assert settings.api_url("/channels") == "https://api.kick.test/public/v1/channels"
    assert settings.api_url("public-key") == "https://api.kick.test/public/v1/public-key"


def test_load_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KICK_CLIENT_ID", "cid")
    monkeypatch.setenv("KICK_CLIENT_SECRET", "csecret")
    monkeypatch.setenv("KICK_WEBHOOK_PORT", "8080")
    monkeypatch.setenv("KICK_RATE_LIMIT_BACKOFF_SECONDS", "2.5")
    monkeypatch.setenv("KICK_LOG_LEVEL", "debug")

    settings = _load_from_env()

    assert settings.client_id == "cid"
    assert settings.client_secret == "csecret"
    assert settings.webhook_port == 8080
    assert settings.rate_limit_backoff_seconds == 2.5
    assert settings.log_level == "DEBUG"


def test_get_kick_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KICK_CLIENT_ID", "primeiro")
    first = get_kick_settings()
    monkeypatch.setenv("KICK_CLIENT_ID", "segundo")
    assert get_kick_settings() is first
    assert first.client_id == "primeiro"


def test_validate_ok() -> None:
    assert KickSettings(client_id="cid", client_secret="secret").validate() == []


def test_validate_reports_each_problem() -> None:
    errors = KickSettings(
        rate_limit_backoff_seconds=5.0,
        rate_limit_backoff_max_seconds=1.0,
        webhook_port=0,
        webhook_path="webhook",
    ).validate()

    assert "KICK_CLIENT_ID não configurado" in errors
    assert "KICK_CLIENT_SECRET não configurado" in errors
    assert any("KICK_RATE_LIMIT_BACKOFF_MAX_SECONDS" in error for error in errors)
    assert any("KICK_WEBHOOK_PORT" in error for error in errors)
    assert any("KICK_WEBHOOK_PATH" in error for error in errors)
