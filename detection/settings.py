"""
AI Content Detection Layer - Injected Settings
===============================================

The orchestrator and providers never read the process environment. They are
built from a ``DetectionSettings`` value. ``load_settings()`` is the one place
that maps environment variables (and an optional ``.env`` file) onto it, and
is meant to be called by whatever hosts the core (the API, a worker, a CLI).

Environment variables:
- OPENAI_API_KEY, OPENAI_MODEL, OPENAI_BASE_URL, ENABLE_OPENAI_DETECTOR
- ANTHROPIC_API_KEY, ANTHROPIC_MODEL, ANTHROPIC_BASE_URL, ENABLE_ANTHROPIC_DETECTOR
- HUGGINGFACE_API_URL, HUGGINGFACE_API_TOKEN, ENABLE_HF_DETECTOR (default: false)
- DETECTION_PROVIDER_TIMEOUT, DETECTION_PROVIDER_RETRIES
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .config import (
    DEFAULT_BASE_URLS,
    DEFAULT_MODELS,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ProviderSettings(BaseModel):
    """Per-provider feature flag, credentials and transport limits."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=True)
    api_key: Optional[str] = Field(default=None)
    endpoint: Optional[str] = Field(default=None)
    model: Optional[str] = Field(default=None)
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    retries: int = Field(default=DEFAULT_RETRIES, ge=0)


class DetectionSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    openai: ProviderSettings = Field(
        default_factory=lambda: ProviderSettings(
            endpoint=DEFAULT_BASE_URLS["openai"], model=DEFAULT_MODELS["openai"]
        )
    )
    anthropic: ProviderSettings = Field(
        default_factory=lambda: ProviderSettings(
            endpoint=DEFAULT_BASE_URLS["anthropic"], model=DEFAULT_MODELS["anthropic"]
        )
    )
    huggingface: ProviderSettings = Field(
        default_factory=lambda: ProviderSettings(enabled=False)
    )


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean flag: {raw!r}")


def _optional(env: Mapping[str, str], key: str) -> Optional[str]:
    value = env.get(key, "").strip()
    return value or None


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    use_dotenv: bool = True,
) -> DetectionSettings:
    """
    Build ``DetectionSettings`` from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.
        use_dotenv: Load a ``.env`` file into the process environment first.
            Ignored when ``environ`` is given explicitly.

    Returns:
        Frozen settings ready to inject into ``DetectionOrchestrator``.

    Raises:
        ValueError: if a feature flag or numeric limit cannot be parsed.
    """
    if environ is None:
        if use_dotenv:
            load_dotenv()
        environ = os.environ

    timeout = float(environ.get("DETECTION_PROVIDER_TIMEOUT") or DEFAULT_TIMEOUT_SECONDS)
    retries = int(environ.get("DETECTION_PROVIDER_RETRIES") or DEFAULT_RETRIES)

    settings = DetectionSettings(
        openai=ProviderSettings(
            enabled=_parse_bool(environ.get("ENABLE_OPENAI_DETECTOR"), True),
            api_key=_optional(environ, "OPENAI_API_KEY"),
            endpoint=_optional(environ, "OPENAI_BASE_URL") or DEFAULT_BASE_URLS["openai"],
            model=_optional(environ, "OPENAI_MODEL") or DEFAULT_MODELS["openai"],
            timeout=timeout,
            retries=retries,
        ),
        anthropic=ProviderSettings(
            enabled=_parse_bool(environ.get("ENABLE_ANTHROPIC_DETECTOR"), True),
            api_key=_optional(environ, "ANTHROPIC_API_KEY"),
            endpoint=_optional(environ, "ANTHROPIC_BASE_URL") or DEFAULT_BASE_URLS["anthropic"],
            model=_optional(environ, "ANTHROPIC_MODEL") or DEFAULT_MODELS["anthropic"],
            timeout=timeout,
            retries=retries,
        ),
        huggingface=ProviderSettings(
            enabled=_parse_bool(environ.get("ENABLE_HF_DETECTOR"), False),
            api_key=_optional(environ, "HUGGINGFACE_API_TOKEN"),
            endpoint=_optional(environ, "HUGGINGFACE_API_URL"),
            timeout=timeout,
            retries=retries,
        ),
    )

    logger.info(
        "Detection settings loaded (openai=%s, anthropic=%s, huggingface=%s)",
        "on" if settings.openai.enabled else "off",
        "on" if settings.anthropic.enabled else "off",
        "on" if settings.huggingface.enabled else "off",
    )
    return settings
