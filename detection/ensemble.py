"""
AI Content Detection Layer - Ensemble Fusion
=============================================
"""

import logging
from typing import Iterable, List, Sequence

from .config import (
    CONFIDENCE_BASE,
    CONFIDENCE_CEILING,
    CONFIDENCE_PER_PROVIDER,
    MAX_DETAIL_ITEMS,
)
from .heuristic import fallback_score, round_half_up
from .schemas import (
    AnalysisDetails,
    AnalysisResult,
    Outcome,
    ProviderSuccess,
    SentenceScore,
    is_success,
)

logger = logging.getLogger(__name__)


def compute_ai_probability(scores: Sequence[float]) -> float:
    """
    Average the contributing provider scores.

    Args:
        scores: Non-empty list of 0-100 probabilities.

    Returns:
        Mean rounded to one decimal, clamped to [0, 100].
    """
    if not scores:
        raise ValueError("At least one score is required")

    mean = sum(scores) / len(scores)
    return round_half_up(max(0.0, min(100.0, mean)), 1)


def compute_confidence(successful_providers: int) -> float:
    """
    Confidence grows with the number of providers that actually answered.

    The fallback heuristic does not count as a provider, so a fallback-only
    result always carries the base confidence.
    """
    confidence = CONFIDENCE_BASE + CONFIDENCE_PER_PROVIDER * successful_providers
    return round_half_up(min(CONFIDENCE_CEILING, confidence), 1)


def merge_models(successes: Iterable[ProviderSuccess]) -> List[str]:
    """Set union of detected model tags, in first-seen order."""
    seen = {}
    for success in successes:
        for model in success.detected_models:
            seen.setdefault(model, None)
    return list(seen)


def merge_details(
    successes: Iterable[ProviderSuccess],
    limit: int = MAX_DETAIL_ITEMS,
) -> AnalysisDetails:
    """Concatenate evidence in provider order and keep the first `limit` of each list."""
    sentence_scores: List[SentenceScore] = []
    pattern_matches: List[str] = []
    linguistic_markers: List[str] = []

    for success in successes:
        sentence_scores.extend(success.details.sentence_scores)
        pattern_matches.extend(success.details.pattern_matches)
        linguistic_markers.extend(success.details.linguistic_markers)

    return AnalysisDetails(
        sentence_scores=sentence_scores[:limit],
        pattern_matches=pattern_matches[:limit],
        linguistic_markers=linguistic_markers[:limit],
    )


def fuse_outcomes(
    content: str,
    outcomes: Sequence[Outcome],
) -> AnalysisResult:
    """
    Combine every provider outcome into one bounded result.

    Args:
        content: The analyzed text, needed only for the fallback heuristic.
        outcomes: One outcome per provider, in provider declaration order.

    Returns:
        AnalysisResult with averaged probability, provider-count confidence,
        merged model tags and truncated evidence.
    """
    successes = [o for o in outcomes if is_success(o)]

    if successes:
        scores = [s.ai_probability for s in successes]
    else:
        scores = [fallback_score(content)]
        logger.info(
            "No provider signal available (%d failed); using length heuristic score %.1f",
            len(outcomes), scores[0],
        )

    return AnalysisResult(
        ai_probability=compute_ai_probability(scores),
        confidence_score=compute_confidence(len(successes)),
        detected_models=merge_models(successes),
        analysis_details=merge_details(successes),
    )
