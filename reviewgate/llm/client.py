"""HTTP client for the external review classification model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import hashlib
import logging
from time import perf_counter
from typing import Any

import requests

from reviewgate.core.config import Config, get_config
from reviewgate.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

EMPTY_OUTPUT = "{}"


@dataclass(frozen=True)
class ClassifierResponse:
    text: str
    provider: str
    model_name: str
    prompt_hash: str
    latency_ms: int
    generated_at: str


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        return str(error.get("message") or error.get("status") or error)
    return str(error)


def _first_gemini_text(body: dict) -> str:
    candidates = body.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return EMPTY_OUTPUT
    parts = (candidates[0].get("content") or {}).get("parts") or []
    if not parts or not isinstance(parts[0], dict):
        return EMPTY_OUTPUT
    return parts[0].get("text") or EMPTY_OUTPUT


class ClassifierClient:
    """Single-attempt adapter for Gemini `generateContent` or an Ollama server.

    One instance is built per process and shared across requests; the
    underlying `requests.Session` pools connections.
    """

    def __init__(self, settings: Config | None = None, session: requests.Session | None = None) -> None:
        self.settings = settings or get_config()
        self.session = session or requests.Session()

    @property
    def provider(self) -> str:
        return self.settings.CLASSIFIER_PROVIDER

    @property
    def model_name(self) -> str:
        if self.provider == "ollama":
            return self.settings.OLLAMA_MODEL
        return self.settings.GEMINI_MODEL

    def _build_request(self, prompt: str) -> tuple[str, dict, dict]:
        if self.provider == "ollama":
            payload = {
                "model": self.settings.OLLAMA_MODEL,
                "prompt": prompt,
                "stream": False,
                "format": "json",
            }
            return self.settings.OLLAMA_URL, payload, {}

        url = f"{self.settings.GEMINI_ENDPOINT}/{self.settings.GEMINI_MODEL}:generateContent"
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": 0},
        }
        return url, payload, {"key": self.settings.GEMINI_API_KEY or ""}

    def _extract_text(self, body: dict) -> str:
        if self.provider == "ollama":
            return body.get("response") or EMPTY_OUTPUT
        return _first_gemini_text(body)

    def generate(self, prompt: str) -> ClassifierResponse:
        """Send one prompt and return the first choice's raw text.

        Raises UpstreamError on transport failure or an error payload. No retries.
        """
        url, payload, params = self._build_request(prompt)
        timeout = (self.settings.CLASSIFIER_CONNECT_TIMEOUT_SECONDS, self.settings.CLASSIFIER_TIMEOUT_SECONDS)
        started = perf_counter()
        try:
            response = self.session.post(url, params=params, json=payload, timeout=timeout)
        except requests.exceptions.RequestException as exc:
            logger.error(
                "classifier.call.failed",
                extra={
                    "event": "classifier.call.failed",
                    "provider": self.provider,
                    "model": self.model_name,
                    "error": str(exc),
                },
            )
            raise UpstreamError(f"Classifier request failed: {exc.__class__.__name__}") from exc
        latency_ms = int((perf_counter() - started) * 1000)

        try:
            body = response.json()
        except ValueError as exc:
            logger.error(
                "classifier.response.invalid_body",
                extra={
                    "event": "classifier.response.invalid_body",
                    "provider": self.provider,
                    "http_status": response.status_code,
                },
            )
            raise UpstreamError(
                f"Classifier returned a non-JSON response (HTTP {response.status_code})."
            ) from exc

        if isinstance(body, dict) and body.get("error"):
            message = _error_message(body["error"])
            logger.error(
                "classifier.response.error_payload",
                extra={
                    "event": "classifier.response.error_payload",
                    "provider": self.provider,
                    "http_status": response.status_code,
                    "error": body["error"],
                },
            )
            raise UpstreamError(f"Classifier API error: {message}")

        if response.status_code >= 400 or not isinstance(body, dict):
            logger.error(
                "classifier.response.http_error",
                extra={
                    "event": "classifier.response.http_error",
                    "provider": self.provider,
                    "http_status": response.status_code,
                },
            )
            raise UpstreamError(f"Classifier API error: HTTP {response.status_code}")

        logger.debug(
            "classifier.response.raw",
            extra={"event": "classifier.response.raw", "provider": self.provider, "body": body},
        )
        return ClassifierResponse(
            text=self._extract_text(body),
            provider=self.provider,
            model_name=self.model_name,
            prompt_hash=hashlib.sha256(prompt.encode("utf-8")).hexdigest(),
            latency_ms=latency_ms,
            generated_at=datetime.now(timezone.utc).isoformat(),
        )
