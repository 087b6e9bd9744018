"""
OpenAI chat-completions detector.

API docs: https://platform.openai.com/docs/api-reference/chat
The model is asked for a JSON object in the structured shape, which is then
run through the shared normalizer.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_BASE_URLS, DEFAULT_MODELS
from ..schemas import AnalysisOptions, ProviderSuccess
from .base import DetectionProvider, detection_prompt
from .normalize import extract_json_object, normalize_payload

logger = logging.getLogger(__name__)


class OpenAIProvider(DetectionProvider):
    name = "openai"

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.api_key)

    async def _analyze(self, content: str, options: AnalysisOptions) -> ProviderSuccess:
        payload = {
            "model": self.settings.model or DEFAULT_MODELS[self.name],
            "temperature": 0,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": detection_prompt(options)},
                {"role": "user", "content": content},
            ],
        }
        headers = {"Authorization": f"Bearer {self.settings.api_key}"}
        url = f"{(self.settings.endpoint or DEFAULT_BASE_URLS[self.name]).rstrip('/')}/chat/completions"

        async with self._client(headers=headers) as client:
            response = await client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()

        try:
            reply = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise ValueError("completion has no message content")
        if not isinstance(reply, str):
            raise ValueError("completion message content is not text")

        logger.debug("OpenAI reply (%d chars) from %s", len(reply), self.settings.model)
        return normalize_payload(self.name, extract_json_object(reply))
