"""Configuration module for the ReviewGate service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from reviewgate.core.exceptions import ConfigurationError

load_dotenv()

SUPPORTED_CLASSIFIER_PROVIDERS = {"gemini", "ollama"}


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_list(value: str | None, default: tuple[str, ...] = ()) -> tuple[str, ...]:
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    DB_CONNECTIVITY_REQUIRED: bool
    CLASSIFIER_PROVIDER: str
    GEMINI_API_KEY: str | None
    GEMINI_MODEL: str
    GEMINI_ENDPOINT: str
    OLLAMA_URL: str
    OLLAMA_MODEL: str
    CLASSIFIER_TIMEOUT_SECONDS: int
    CLASSIFIER_CONNECT_TIMEOUT_SECONDS: float
    WEBHOOK_SECRET: str | None
    CORS_ALLOW_ORIGINS: tuple[str, ...]
    API_HOST: str
    API_PORT: int
    API_PREFIX: str
    LOG_LEVEL: str
    LOG_FILE: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"

    @property
    def webhook_secret_enabled(self) -> bool:
        return bool(self.WEBHOOK_SECRET)


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=(resolved_env != "production"))

    config = Config(
        APP_NAME="ReviewGate",
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        DEBUG=debug if resolved_env != "production" else False,
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///./reviewgate.db"),
        DB_CONNECTIVITY_REQUIRED=_as_bool(
            os.getenv("DB_CONNECTIVITY_REQUIRED"), default=(resolved_env == "production")
        ),
        CLASSIFIER_PROVIDER=os.getenv("CLASSIFIER_PROVIDER", "gemini").strip().lower(),
        GEMINI_API_KEY=os.getenv("GEMINI_KEY") or os.getenv("GEMINI_API_KEY"),
        GEMINI_MODEL=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        GEMINI_ENDPOINT=os.getenv(
            "GEMINI_ENDPOINT", "https://generativelanguage.googleapis.com/v1/models"
        ).rstrip("/"),
        OLLAMA_URL=os.getenv("OLLAMA_URL", "http://localhost:11434/api/generate"),
        OLLAMA_MODEL=os.getenv("OLLAMA_MODEL", "qwen2.5:7b"),
        CLASSIFIER_TIMEOUT_SECONDS=int(os.getenv("CLASSIFIER_TIMEOUT_SECONDS", "30")),
        CLASSIFIER_CONNECT_TIMEOUT_SECONDS=float(os.getenv("CLASSIFIER_CONNECT_TIMEOUT_SECONDS", "5")),
        WEBHOOK_SECRET=os.getenv("WEBHOOK_SECRET") or None,
        CORS_ALLOW_ORIGINS=_as_list(os.getenv("CORS_ALLOW_ORIGINS"), default=("*",)),
        API_HOST=os.getenv("API_HOST", "0.0.0.0"),
        API_PORT=int(os.getenv("API_PORT", "8000")),
        API_PREFIX=os.getenv("API_PREFIX", "/api/v1").rstrip("/"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
    )
    _validate_config(config)
    return config


def _validate_database_url(database_url: str) -> None:
    parsed = urlparse(database_url)
    if parsed.scheme not in {"sqlite", "postgresql", "postgresql+psycopg2"}:
        raise ConfigurationError(
            "DATABASE_URL must use sqlite:// or postgresql:// style URL."
        )
    if parsed.scheme.startswith("postgresql") and not parsed.hostname:
        raise ConfigurationError("PostgreSQL DATABASE_URL is missing hostname.")


def _validate_config(config: Config) -> None:
    _validate_database_url(config.DATABASE_URL)

    if config.CLASSIFIER_PROVIDER not in SUPPORTED_CLASSIFIER_PROVIDERS:
        raise ConfigurationError("CLASSIFIER_PROVIDER must be one of gemini/ollama.")
    if config.CLASSIFIER_TIMEOUT_SECONDS < 1:
        raise ConfigurationError("CLASSIFIER_TIMEOUT_SECONDS must be >= 1.")
    if config.CLASSIFIER_CONNECT_TIMEOUT_SECONDS <= 0:
        raise ConfigurationError("CLASSIFIER_CONNECT_TIMEOUT_SECONDS must be > 0.")
    if config.API_PREFIX and not config.API_PREFIX.startswith("/"):
        raise ConfigurationError("API_PREFIX must start with '/'.")
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if config.is_production and config.CLASSIFIER_PROVIDER == "gemini" and not config.GEMINI_API_KEY:
        raise ConfigurationError("Production deployment with the gemini provider requires GEMINI_KEY.")
    if config.is_production and "change_me" in config.DATABASE_URL.lower():
        raise ConfigurationError("Production DATABASE_URL uses placeholder credentials.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
