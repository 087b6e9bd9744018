"""
Hugging Face Inference API / Space detector.

HUGGINGFACE_API_URL may point at a hosted Inference endpoint running a
text-classification model, or at a Space that returns the structured shape.
Both are accepted (see ``normalize.normalize_payload``). Without an endpoint
there is no local stand-in and the provider reports a failure.
"""

from __future__ import annotations

from ..schemas import AnalysisOptions, ProviderSuccess
from .base import DetectionProvider
from .normalize import normalize_payload


class HuggingFaceProvider(DetectionProvider):
    name = "huggingface"

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.endpoint)

    async def _analyze(self, content: str, options: AnalysisOptions) -> ProviderSuccess:
        headers = {}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"

        async with self._client(headers=headers) as client:
            response = await client.post(self.settings.endpoint, json={"inputs": content})
            response.raise_for_status()
            data = response.json()

        return normalize_payload(self.name, data)
