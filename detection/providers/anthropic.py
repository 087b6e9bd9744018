"""
Anthropic Messages API detector.

API docs: https://docs.anthropic.com/en/api/messages
"""

from __future__ import annotations

import logging

from ..config import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_MAX_TOKENS,
    DEFAULT_BASE_URLS,
    DEFAULT_MODELS,
)
from ..schemas import AnalysisOptions, ProviderSuccess
from .base import DetectionProvider, detection_prompt
from .normalize import extract_json_object, normalize_payload

logger = logging.getLogger(__name__)


class AnthropicProvider(DetectionProvider):
    name = "anthropic"

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.api_key)

    async def _analyze(self, content: str, options: AnalysisOptions) -> ProviderSuccess:
        payload = {
            "model": self.settings.model or DEFAULT_MODELS[self.name],
            "max_tokens": ANTHROPIC_MAX_TOKENS,
            "temperature": 0,
            "system": detection_prompt(options),
            "messages": [{"role": "user", "content": content}],
        }
        headers = {
            "x-api-key": self.settings.api_key,
            "anthropic-version": ANTHROPIC_API_VERSION,
        }
        url = f"{(self.settings.endpoint or DEFAULT_BASE_URLS[self.name]).rstrip('/')}/v1/messages"

        async with self._client(headers=headers) as client:
            response = await client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()

        blocks = data.get("content") if isinstance(data, dict) else None
        texts = [
            block["text"]
            for block in blocks or []
            if isinstance(block, dict) and block.get("type") == "text" and isinstance(block.get("text"), str)
        ]
        if not texts:
            raise ValueError("message has no text block")

        logger.debug("Anthropic reply (%d chars) from %s", len(texts[0]), self.settings.model)
        return normalize_payload(self.name, extract_json_object(texts[0]))
