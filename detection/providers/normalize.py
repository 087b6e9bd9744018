"""
Response-shape normalization shared by every provider.

Remote detectors answer in one of two shapes:

a) a structured object::

       {"ai_probability": 82, "detected_models": ["gpt-4"],
        "analysis_details": {"sentence_scores": [...], ...}}

b) a classification array (Hugging Face text-classification style), possibly
   nested one level::

       [{"label": "AI", "score": 0.82}, {"label": "Human", "score": 0.18}]

Anything else becomes a neutral 50 signal.
"""

from __future__ import annotations

import json
import math
from typing import Any, List, Optional

from ..config import AI_LABEL_MARKERS, NEUTRAL_PROBABILITY
from ..heuristic import round_half_up
from ..schemas import AnalysisDetails, ProviderSuccess, SentenceScore


def clamp_probability(value: float) -> float:
    return max(0.0, min(100.0, float(value)))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _to_number(value: Any) -> Optional[float]:
    """Loose numeric coercion: null, blank strings and booleans count as numbers."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if _is_number(value):
        return float(value)
    if isinstance(value, str):
        if not value.strip():
            return 0.0
        try:
            number = float(value)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _sentence_scores(value: Any) -> List[SentenceScore]:
    if not isinstance(value, list):
        return []
    scores = []
    for item in value:
        if not isinstance(item, dict):
            continue
        index, score = item.get("index"), item.get("score")
        if isinstance(index, int) and not isinstance(index, bool) and _is_number(score):
            scores.append(SentenceScore(index=index, score=float(score)))
    return scores


def normalize_details(details: Any) -> AnalysisDetails:
    if not isinstance(details, dict):
        return AnalysisDetails()
    return AnalysisDetails(
        sentence_scores=_sentence_scores(details.get("sentence_scores")),
        pattern_matches=_string_list(details.get("pattern_matches")),
        linguistic_markers=_string_list(details.get("linguistic_markers")),
    )


def _classification_score(items: list) -> Optional[float]:
    flat: list = []
    for item in items:
        if isinstance(item, list):
            flat.extend(item)
        else:
            flat.append(item)

    for item in flat:
        if not isinstance(item, dict):
            continue
        label = item.get("label")
        label = label.lower() if isinstance(label, str) else ""
        if any(marker in label for marker in AI_LABEL_MARKERS):
            # First matching label wins even when its score is unusable.
            if "score" not in item:
                return None
            return _to_number(item["score"])
    return None


def normalize_payload(provider_name: str, data: Any) -> ProviderSuccess:
    """
    Map a decoded provider response onto ``ProviderSuccess``.

    Args:
        provider_name: Name recorded on the outcome.
        data: Decoded JSON body.

    Returns:
        ProviderSuccess. Unknown shapes yield the neutral probability.
    """
    if isinstance(data, dict) and _is_number(data.get("ai_probability")):
        models = data.get("detected_models")
        return ProviderSuccess(
            provider_name=provider_name,
            ai_probability=clamp_probability(data["ai_probability"]),
            detected_models=_string_list(models),
            details=normalize_details(data.get("analysis_details")),
        )

    if isinstance(data, list):
        score = _classification_score(data)
        if score is not None:
            return ProviderSuccess(
                provider_name=provider_name,
                ai_probability=clamp_probability(round_half_up(score * 100)),
            )

    return ProviderSuccess(provider_name=provider_name, ai_probability=NEUTRAL_PROBABILITY)


def extract_json_object(text: str) -> Any:
    """
    Decode the JSON object in a model reply, tolerating surrounding prose
    or a fenced code block.

    Raises:
        ValueError: if no JSON object can be decoded.
    """
    text = text.strip()
    try:
        return json.loads(text)
    except ValueError:
        pass

    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        raise ValueError("reply contains no JSON object")
    return json.loads(text[start:end + 1])
