"""
AI Content Detection Layer - Request Orchestrator
==================================================
"""

import asyncio
import logging
import time
from typing import List, Optional, Sequence

from .ensemble import fuse_outcomes
from .providers import (
    AnthropicProvider,
    DetectionProvider,
    HuggingFaceProvider,
    OpenAIProvider,
)
from .schemas import (
    AnalysisOptions,
    AnalysisRequest,
    AnalysisResult,
    Outcome,
    ProviderFailure,
    ProviderInfo,
    is_success,
)
from .settings import DetectionSettings

logger = logging.getLogger(__name__)


class DetectionOrchestrator:
    """Fans a text out to every provider and fuses whatever comes back."""

    def __init__(self, providers: Sequence[DetectionProvider]):
        self.providers: List[DetectionProvider] = list(providers)

    @classmethod
    def from_settings(cls, settings: Optional[DetectionSettings] = None) -> "DetectionOrchestrator":
        """Build the default ensemble: OpenAI, Anthropic, Hugging Face."""
        settings = settings or DetectionSettings()
        return cls([
            OpenAIProvider(settings.openai),
            AnthropicProvider(settings.anthropic),
            HuggingFaceProvider(settings.huggingface),
        ])

    async def analyze(
        self,
        content: str,
        options: Optional[AnalysisOptions] = None,
    ) -> AnalysisResult:
        """Analyze a text with the full ensemble."""
        if not isinstance(content, str) or not content:
            raise ValueError("content must be a non-empty string")

        start_time = time.perf_counter()
        options = options or AnalysisOptions()

        # Step 1: Query every provider concurrently and wait for all of them
        outcomes = await self._call_providers(content, options)

        # Step 2: Fuse in declaration order
        result = fuse_outcomes(content, outcomes)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "Analyzed %d chars: %d/%d providers succeeded, ai_probability=%.1f (%.2f ms)",
            len(content),
            sum(1 for o in outcomes if is_success(o)),
            len(outcomes),
            result.ai_probability,
            processing_time,
        )
        return result

    async def analyze_request(self, request: AnalysisRequest) -> AnalysisResult:
        return await self.analyze(request.content, request.options)

    def analyze_sync(
        self,
        content: str,
        options: Optional[AnalysisOptions] = None,
    ) -> AnalysisResult:
        """Blocking entry point for callers without an event loop (workers, scripts)."""
        return asyncio.run(self.analyze(content, options))

    def describe_providers(self) -> List[ProviderInfo]:
        return [provider.describe() for provider in self.providers]

    async def _call_providers(
        self,
        content: str,
        options: AnalysisOptions,
    ) -> List[Outcome]:
        """Join-all over the providers; a provider that raises counts as failed."""
        results = await asyncio.gather(
            *(provider.run(content, options) for provider in self.providers),
            return_exceptions=True,
        )

        outcomes: List[Outcome] = []
        for provider, result in zip(self.providers, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning("Provider %s raised past its boundary: %s", provider.name, result)
                result = ProviderFailure(provider_name=provider.name, reason=str(result))
            outcomes.append(result)
        return outcomes


async def analyze_content(
    content: str,
    options: Optional[AnalysisOptions] = None,
    settings: Optional[DetectionSettings] = None,
) -> AnalysisResult:
    """Analyze `content` with the default ensemble built from `settings`."""
    return await DetectionOrchestrator.from_settings(settings).analyze(content, options)
