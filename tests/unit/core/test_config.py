from __future__ import annotations

import pytest

from reviewgate.core.config import _build_config
from reviewgate.core.exceptions import ConfigurationError

_ENV_KEYS = (
    "ENV",
    "DEBUG",
    "DATABASE_URL",
    "DB_CONNECTIVITY_REQUIRED",
    "CLASSIFIER_PROVIDER",
    "GEMINI_KEY",
    "GEMINI_API_KEY",
    "WEBHOOK_SECRET",
    "CORS_ALLOW_ORIGINS",
    "API_PREFIX",
    "LOG_LEVEL",
    "CLASSIFIER_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_are_valid():
    cfg = _build_config()
    assert cfg.ENV == "development"
    assert cfg.CLASSIFIER_PROVIDER == "gemini"
    assert cfg.DATABASE_URL.startswith("sqlite")
    assert cfg.WEBHOOK_SECRET is None
    assert cfg.webhook_secret_enabled is False
    assert cfg.CORS_ALLOW_ORIGINS == ("*",)
    assert cfg.API_PREFIX == "/api/v1"


def test_empty_webhook_secret_disables_check(monkeypatch):
    monkeypatch.setenv("WEBHOOK_SECRET", "")
    assert _build_config().webhook_secret_enabled is False


def test_webhook_secret_and_cors_origins_are_read(monkeypatch):
    monkeypatch.setenv("WEBHOOK_SECRET", "s3cret")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
    cfg = _build_config()
    assert cfg.WEBHOOK_SECRET == "s3cret"
    assert cfg.CORS_ALLOW_ORIGINS == ("https://a.example", "https://b.example")


def test_gemini_key_is_read_from_either_variable(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "from-api-key")
    assert _build_config().GEMINI_API_KEY == "from-api-key"
    monkeypatch.setenv("GEMINI_KEY", "from-key")
    assert _build_config().GEMINI_API_KEY == "from-key"


def test_unknown_provider_is_rejected(monkeypatch):
    monkeypatch.setenv("CLASSIFIER_PROVIDER", "openai")
    with pytest.raises(ConfigurationError, match="CLASSIFIER_PROVIDER"):
        _build_config()


def test_unsupported_database_url_is_rejected(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "mysql://db.example/reviews")
    with pytest.raises(ConfigurationError, match="DATABASE_URL"):
        _build_config()


def test_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("CLASSIFIER_TIMEOUT_SECONDS", "0")
    with pytest.raises(ConfigurationError):
        _build_config()


def test_production_gemini_requires_key():
    with pytest.raises(ConfigurationError, match="GEMINI_KEY"):
        _build_config("production")


def test_production_with_key_is_valid(monkeypatch):
    monkeypatch.setenv("GEMINI_KEY", "k")
    cfg = _build_config("production")
    assert cfg.is_production is True
    assert cfg.DEBUG is False
    assert cfg.DB_CONNECTIVITY_REQUIRED is True
