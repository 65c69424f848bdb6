# core/local_fallback.py
import re
from typing import Final, Iterable, List
from model.verification import (
    Claim,
    ClaimStatus,
    HallucinationFlag,
    OverallVerdict,
    ProviderErrorDetail,
    Severity,
    VerificationResult,
)
from util.constants import LOCAL_FALLBACK_MODEL, MAX_FALLBACK_SENTENCES

_SENTENCE_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"(?<=[.!?])\s+")
# "100%" ends on a non-word char, so it cannot share the trailing \b
ABSOLUTE_WORDING: Final[re.Pattern[str]] = re.compile(
    r"\b(?:always|never|guaranteed|impossible|all|none|proven)\b|\b100%",
    re.IGNORECASE,
)

ABSOLUTE_CONFIDENCE: Final[int] = 20
UNVERIFIED_CONFIDENCE: Final[int] = 35
FALLBACK_CONFIDENCE: Final[int] = 30

ABSOLUTE_EVIDENCE: Final[str] = (
    "Local fallback detected an absolute claim that requires external sources."
)
UNVERIFIED_EVIDENCE: Final[str] = (
    "Local fallback mode: remote AI providers were unavailable, "
    "so this claim could not be externally verified."
)
ABSOLUTE_REASON: Final[str] = (
    "Absolute wording increases hallucination risk without strong source backing."
)
FALLBACK_SUMMARY: Final[str] = (
    "Remote verification models were unavailable. "
    "Returned a local heuristic analysis so the request still succeeds."
)


def split_sentences(text: str, limit: int = MAX_FALLBACK_SENTENCES) -> List[str]:
    parts = (s.strip() for s in _SENTENCE_BOUNDARY.split(text))
    return [s for s in parts if s][:limit]


def is_absolute_claim(sentence: str) -> bool:
    return ABSOLUTE_WORDING.search(sentence) is not None


def _claim_for(sentence: str) -> Claim:
    if is_absolute_claim(sentence):
        return Claim(
            claim=sentence,
            status=ClaimStatus.unsupported,
            confidence=ABSOLUTE_CONFIDENCE,
            evidence=ABSOLUTE_EVIDENCE,
            sourceMatch=False,
        )
    return Claim(
        claim=sentence,
        status=ClaimStatus.unverified,
        confidence=UNVERIFIED_CONFIDENCE,
        evidence=UNVERIFIED_EVIDENCE,
        sourceMatch=False,
    )


def _recommendations(sources: str | None) -> List[str]:
    has_sources = bool(sources and sources.strip())
    return [
        "Configure at least one valid API key (Claude, Gemini, Groq, or OpenRouter).",
        "Retry verification after checking provider quota and key permissions.",
        "Keep citations concise and directly tied to each factual claim."
        if has_sources
        else "Provide supporting sources to improve verification quality.",
    ]


def build_local_fallback(
    ai_text: str,
    sources: str | None,
    errors: Iterable[ProviderErrorDetail] = (),
    exclude: Iterable[str] = (),
) -> VerificationResult:
    """
    Offline stand-in used when every eligible provider failed.

    Deterministic: flags absolute wording, marks everything else unverified.
    The overall score is fixed (30, or 0 with no sentences) rather than
    aggregated from the claims.
    """
    sentences = split_sentences(ai_text)
    claims = [_claim_for(s) for s in sentences]
    hallucinations = [
        HallucinationFlag(text=s, reason=ABSOLUTE_REASON, severity=Severity.medium)
        for s in sentences
        if is_absolute_claim(s)
    ]

    return VerificationResult(
        overallVerdict=OverallVerdict.partial,
        confidenceScore=FALLBACK_CONFIDENCE if claims else 0,
        summary=FALLBACK_SUMMARY,
        claims=claims,
        hallucinations=hallucinations,
        recommendations=_recommendations(sources),
        modelUsed=LOCAL_FALLBACK_MODEL,
        providerErrors=list(errors),
        excludedModels=[str(m) for m in exclude],
    )
