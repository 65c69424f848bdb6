# model/verification.py
import math
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClaimStatus(str, Enum):
    verified = "verified"
    unverified = "unverified"
    false = "false"
    unsupported = "unsupported"


class OverallVerdict(str, Enum):
    verified = "verified"
    partial = "partial"
    hallucination = "hallucination"
    error = "error"


class Severity(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


def _normalize_score(value: object) -> object:
    """Round and clamp numeric scores into 0..100; leave anything else to validation."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return value
    if isinstance(value, float) and not math.isfinite(value):
        return value
    if isinstance(value, (int, float)):
        return max(0, min(100, round(value)))
    return value


class Claim(BaseModel):
    model_config = ConfigDict(frozen=True)

    claim: str
    status: ClaimStatus
    confidence: int = Field(0, ge=0, le=100)
    evidence: str = ""
    sourceMatch: bool = False

    @field_validator("confidence", mode="before")
    @classmethod
    def normalize_confidence(cls, value: object) -> object:
        return _normalize_score(value)


class HallucinationFlag(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    reason: str = ""
    severity: Severity = Severity.medium


class ProviderErrorDetail(BaseModel):
    model: str
    error: str


class VerificationResult(BaseModel):
    overallVerdict: OverallVerdict
    confidenceScore: int = Field(0, ge=0, le=100)
    summary: str = ""
    claims: list[Claim] = Field(default_factory=list)
    hallucinations: list[HallucinationFlag] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    modelUsed: str | None = None

    # Diagnostics, only present on degraded results
    providerErrors: list[ProviderErrorDetail] | None = None
    excludedModels: list[str] | None = None
    error: str | None = None
    raw: str | None = None

    @field_validator("confidenceScore", mode="before")
    @classmethod
    def normalize_confidence_score(cls, value: object) -> object:
        return _normalize_score(value)
