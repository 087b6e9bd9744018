"""
AI Content Detection Layer - Pydantic Schema Definitions
=========================================================
"""

from typing import Annotated, List, Literal, Optional, TypeGuard, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================

class ProviderStatus(str, Enum):
    ENABLED = "enabled"
    LOCAL = "local"
    UNCONFIGURED = "unconfigured"
    DISABLED = "disabled"


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class AnalysisOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    detailed_analysis: bool = Field(default=True)
    batch_processing: bool = Field(default=False)
    language: str = Field(default="en")


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str = Field(..., min_length=1)
    options: AnalysisOptions = Field(default_factory=AnalysisOptions)


# =============================================================================
# EVIDENCE
# =============================================================================

class SentenceScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(...)
    score: float = Field(...)


class AnalysisDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    sentence_scores: List[SentenceScore] = Field(default_factory=list)
    pattern_matches: List[str] = Field(default_factory=list)
    linguistic_markers: List[str] = Field(default_factory=list)


# =============================================================================
# PROVIDER OUTCOMES
# =============================================================================

class ProviderSuccess(BaseModel):
    """A usable signal from one provider, already normalized to 0-100."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    provider_name: str = Field(...)
    ai_probability: float = Field(..., ge=0, le=100)
    detected_models: List[str] = Field(default_factory=list)
    details: AnalysisDetails = Field(default_factory=AnalysisDetails)

    @field_validator("detected_models")
    @classmethod
    def unique_models(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))


class ProviderFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    provider_name: str = Field(...)
    reason: str = Field(...)


Outcome = Annotated[
    Union[ProviderSuccess, ProviderFailure],
    Field(discriminator="status"),
]


def is_success(outcome: Outcome) -> TypeGuard[ProviderSuccess]:
    return isinstance(outcome, ProviderSuccess)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ai_probability: float = Field(..., ge=0, le=100)
    confidence_score: float = Field(..., ge=0, le=100)
    detected_models: List[str] = Field(default_factory=list)
    analysis_details: AnalysisDetails = Field(default_factory=AnalysisDetails)


# =============================================================================
# HEALTH CHECK SCHEMAS
# =============================================================================

class ProviderInfo(BaseModel):
    name: str = Field(...)
    status: ProviderStatus = Field(...)
    endpoint: Optional[str] = Field(default=None)
    model: Optional[str] = Field(default=None)
    timeout_seconds: float = Field(...)


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded"] = Field(...)
    version: str = Field(...)
    providers: List[ProviderInfo] = Field(...)
