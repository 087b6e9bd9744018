"""
AI Content Detection Layer - Configuration Constants
=====================================================
"""

from typing import Dict, Tuple

# =============================================================================
# SERVICE
# =============================================================================

SERVICE_VERSION: str = "1.0.0"

# Declaration order of the default ensemble. Fusion concatenates evidence in
# this order.
PROVIDER_ORDER: Tuple[str, ...] = ("openai", "anthropic", "huggingface")

# =============================================================================
# FUSION
# =============================================================================

CONFIDENCE_BASE: float = 60.0
CONFIDENCE_PER_PROVIDER: float = 20.0
CONFIDENCE_CEILING: float = 100.0

MAX_DETAIL_ITEMS: int = 20

# =============================================================================
# FALLBACK HEURISTIC
# =============================================================================

FALLBACK_MIN_LENGTH: int = 10
FALLBACK_SCALE: float = 10.0

# =============================================================================
# PROVIDER NORMALIZATION
# =============================================================================

NEUTRAL_PROBABILITY: float = 50.0

# Labels in a classification array that identify the "machine written" class.
AI_LABEL_MARKERS: Tuple[str, ...] = ("ai", "gpt")

# Placeholder scores used when a provider has no credential:
# clamp(0, 100, (len(content) % modulus) + offset)
LOCAL_PLACEHOLDER_PARAMS: Dict[str, Tuple[int, int]] = {
    "openai": (43, 30),
    "anthropic": (37, 25),
}

# =============================================================================
# PROVIDER DEFAULTS
# =============================================================================

DEFAULT_TIMEOUT_SECONDS: float = 20.0
DEFAULT_CONNECT_TIMEOUT_SECONDS: float = 5.0
DEFAULT_RETRIES: int = 1

DEFAULT_MODELS: Dict[str, str] = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-haiku-latest",
}

DEFAULT_BASE_URLS: Dict[str, str] = {
    "openai": "https://api.openai.com/v1",
    "anthropic": "https://api.anthropic.com",
}

ANTHROPIC_API_VERSION: str = "2023-06-01"
ANTHROPIC_MAX_TOKENS: int = 1024

# =============================================================================
# PROMPT
# =============================================================================

DETECTION_SYSTEM_PROMPT: str = (
    "You are a forensic linguist who estimates whether a text was written by "
    "a large language model. Reply with a single JSON object and nothing else, "
    "using exactly these keys: "
    '"ai_probability" (number from 0 to 100), '
    '"detected_models" (array of model family names such as "gpt-4" or "claude-3", '
    "empty if unsure), "
    '"analysis_details" (object with "sentence_scores" as an array of '
    '{"index": int, "score": number 0-100}, "pattern_matches" as an array of '
    'short strings, and "linguistic_markers" as an array of short strings).'
)

SENTENCE_SCORES_HINT: str = "Score up to 20 individual sentences by index."
NO_SENTENCE_SCORES_HINT: str = 'Leave "sentence_scores" empty.'
