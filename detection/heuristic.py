"""
AI Content Detection Layer - Fallback Heuristic
================================================

Weak, reproducible score used only when no provider produced a signal.
Depends on nothing but the content length.
"""

import math

from .config import FALLBACK_MIN_LENGTH, FALLBACK_SCALE


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves upward, e.g. 68.25 -> 68.3 at one digit."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def fallback_score_for_length(length: int) -> float:
    """
    Score a text purely from its length.

    Args:
        length: Number of characters in the content.

    Returns:
        clamp(0, 100, round(log10(max(length, 10)) * 10)) as a float.
    """
    raw = math.log10(max(length, FALLBACK_MIN_LENGTH)) * FALLBACK_SCALE
    return float(min(100, max(0, round_half_up(raw))))


def fallback_score(content: str) -> float:
    return fallback_score_for_length(len(content))
