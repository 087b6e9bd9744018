"""
Pytest fixtures for the detection layer. Providers are stubbed in-process;
remote providers are exercised through httpx.MockTransport.
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional

import pytest

from detection.providers.base import DetectionProvider
from detection.schemas import (
    AnalysisDetails,
    AnalysisOptions,
    ProviderSuccess,
    SentenceScore,
)
from detection.settings import ProviderSettings


class StubProvider(DetectionProvider):
    """Configured provider whose remote call is a canned result or exception."""

    def __init__(
        self,
        name: str,
        result: Optional[ProviderSuccess] = None,
        error: Optional[BaseException] = None,
        delay: float = 0.0,
        settings: Optional[ProviderSettings] = None,
    ):
        super().__init__(settings or ProviderSettings(endpoint="stub://"))
        self.name = name
        self._result = result
        self._error = error
        self._delay = delay
        self.calls: List[str] = []

    @property
    def is_configured(self) -> bool:
        return True

    async def _analyze(self, content: str, options: AnalysisOptions) -> ProviderSuccess:
        self.calls.append(content)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return self._result


def success(
    name: str,
    probability: float,
    models: Optional[List[str]] = None,
    patterns: Optional[List[str]] = None,
    markers: Optional[List[str]] = None,
    sentences: Optional[List[tuple]] = None,
) -> ProviderSuccess:
    return ProviderSuccess(
        provider_name=name,
        ai_probability=probability,
        detected_models=models or [],
        details=AnalysisDetails(
            sentence_scores=[SentenceScore(index=i, score=s) for i, s in (sentences or [])],
            pattern_matches=patterns or [],
            linguistic_markers=markers or [],
        ),
    )


@pytest.fixture
def make_stub() -> Callable[..., StubProvider]:
    return StubProvider


@pytest.fixture
def make_success() -> Callable[..., ProviderSuccess]:
    return success


@pytest.fixture
def disabled_settings() -> ProviderSettings:
    return ProviderSettings(enabled=False, api_key="sk-test", endpoint="https://example.invalid")
