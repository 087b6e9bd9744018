"""
AI Content Detection Layer - Provider Base Class
=================================================

Every provider resolves to an outcome. Disabled providers fail immediately,
unconfigured ones degrade to a local placeholder where one exists, and any
timeout, HTTP, transport or parse error becomes a ``ProviderFailure``.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

import httpx

from ..config import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DETECTION_SYSTEM_PROMPT,
    LOCAL_PLACEHOLDER_PARAMS,
    NO_SENTENCE_SCORES_HINT,
    SENTENCE_SCORES_HINT,
)
from ..schemas import (
    AnalysisOptions,
    Outcome,
    ProviderFailure,
    ProviderInfo,
    ProviderStatus,
    ProviderSuccess,
)
from ..settings import ProviderSettings

logger = logging.getLogger(__name__)


class DetectionProvider(ABC):
    """One AI-text signal source wrapped to the common outcome contract."""

    name: str = "provider"

    def __init__(
        self,
        settings: ProviderSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self._transport = transport

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the remote dependency has the credential/endpoint it needs."""

    @abstractmethod
    async def _analyze(self, content: str, options: AnalysisOptions) -> ProviderSuccess:
        """Call the remote provider. May raise; ``run`` converts errors."""

    @property
    def status(self) -> ProviderStatus:
        if not self.settings.enabled:
            return ProviderStatus.DISABLED
        if self.is_configured:
            return ProviderStatus.ENABLED
        if self.name in LOCAL_PLACEHOLDER_PARAMS:
            return ProviderStatus.LOCAL
        return ProviderStatus.UNCONFIGURED

    def describe(self) -> ProviderInfo:
        return ProviderInfo(
            name=self.name,
            status=self.status,
            endpoint=self.settings.endpoint,
            model=self.settings.model,
            timeout_seconds=self.settings.timeout,
        )

    async def run(self, content: str, options: Optional[AnalysisOptions] = None) -> Outcome:
        """Analyze `content`; never raises."""
        options = options or AnalysisOptions()

        if not self.settings.enabled:
            return self._failure("disabled by configuration")

        if not self.is_configured:
            return self._local_outcome(content)

        try:
            return await asyncio.wait_for(
                self._analyze(content, options), timeout=self.settings.timeout
            )
        except asyncio.TimeoutError:
            reason = f"timed out after {self.settings.timeout:g}s"
        except httpx.HTTPStatusError as e:
            reason = f"HTTP {e.response.status_code}"
        except httpx.HTTPError as e:
            reason = f"transport error: {e.__class__.__name__}: {e}"
        except ValueError as e:
            reason = f"unparseable response: {e}"
        except Exception as e:
            reason = f"unexpected error: {e.__class__.__name__}: {e}"

        logger.warning("Provider %s failed: %s", self.name, reason)
        return self._failure(reason)

    def _local_outcome(self, content: str) -> Outcome:
        params = LOCAL_PLACEHOLDER_PARAMS.get(self.name)
        if params is None:
            return self._failure("remote endpoint not configured")

        modulus, offset = params
        score = min(100, max(0, len(content) % modulus + offset))
        logger.debug("Provider %s has no credential; using placeholder score %d", self.name, score)
        return ProviderSuccess(provider_name=self.name, ai_probability=float(score))

    def _failure(self, reason: str) -> ProviderFailure:
        return ProviderFailure(provider_name=self.name, reason=reason)

    def _client(self, headers: Optional[Dict[str, str]] = None) -> httpx.AsyncClient:
        transport = self._transport or httpx.AsyncHTTPTransport(retries=self.settings.retries)
        connect = min(DEFAULT_CONNECT_TIMEOUT_SECONDS, self.settings.timeout)
        return httpx.AsyncClient(
            transport=transport,
            headers=headers,
            timeout=httpx.Timeout(self.settings.timeout, connect=connect),
        )


def detection_prompt(options: AnalysisOptions) -> str:
    """System prompt for LLM-backed providers."""
    hint = SENTENCE_SCORES_HINT if options.detailed_analysis else NO_SENTENCE_SCORES_HINT
    return f"{DETECTION_SYSTEM_PROMPT} The text language is '{options.language}'. {hint}"
