"""Classification adapter: prompt, call, parse-with-defaults."""

from __future__ import annotations

import logging
from typing import Callable

from reviewgate.core.schemas import ClassificationResult, parse_classification
from reviewgate.llm.client import ClassifierClient, ClassifierResponse
from reviewgate.llm.prompt_templates.defaults import DEFAULT_PROMPT_REGISTRY

logger = logging.getLogger(__name__)

PROMPT_KEY = "review.classification"
PromptRenderer = Callable[[dict], str]


class ClassificationService:
    """Obtain a safety/sentiment verdict for review text.

    Transport failures and error payloads propagate as UpstreamError from the
    client. A successful call with garbled output is absorbed into defaults.
    """

    def __init__(
        self,
        client: ClassifierClient | None = None,
        prompt_registry: dict[str, PromptRenderer] | None = None,
    ) -> None:
        self.client = client or ClassifierClient()
        self.prompt_registry = prompt_registry or dict(DEFAULT_PROMPT_REGISTRY)

    def classify(self, content: str) -> ClassificationResult:
        prompt = self.prompt_registry[PROMPT_KEY]({"content": content})
        logger.debug("classifier.prompt", extra={"event": "classifier.prompt", "prompt": prompt})

        response: ClassifierResponse = self.client.generate(prompt)
        result = parse_classification(response.text)
        logger.info(
            "classifier.call.completed",
            extra={
                "event": "classifier.call.completed",
                "provider": response.provider,
                "model": response.model_name,
                "latency_ms": response.latency_ms,
                "prompt_hash": response.prompt_hash,
                "action": result.action,
                "safety_score": result.safety_score,
            },
        )
        return result
