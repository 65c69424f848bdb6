# core/prompt_builder.py
from typing import Final

PROMPT_PREAMBLE: Final[str] = (
    "You are an expert fact-checker and citation verification system."
)

NO_SOURCES_INSTRUCTION: Final[str] = (
    "No sources provided. Use web knowledge to verify factual claims."
)

# Every provider reply goes through core.response_parser; keep the two in step.
RESPONSE_SCHEMA: Final[str] = (
    "Respond ONLY in valid JSON format. No extra prose. No code fences.\n"
    "\n"
    "{\n"
    '  "overallVerdict": "verified" | "partial" | "hallucination" | "error",\n'
    '  "confidenceScore": 0-100,\n'
    '  "summary": "brief summary",\n'
    '  "claims": [\n'
    "    {\n"
    '      "claim": "claim text",\n'
    '      "status": "verified" | "unverified" | "false" | "unsupported",\n'
    '      "confidence": 0-100,\n'
    '      "evidence": "evidence text",\n'
    '      "sourceMatch": true/false\n'
    "    }\n"
    "  ],\n"
    '  "hallucinations": [\n'
    "    {\n"
    '      "text": "hallucinated content",\n'
    '      "reason": "why false",\n'
    '      "severity": "low" | "medium" | "high"\n'
    "    }\n"
    "  ],\n"
    '  "recommendations": ["recommendation"]\n'
    "}"
)


def _sources_section(sources: str | None) -> str:
    if sources and sources.strip():
        return (
            f"SOURCES PROVIDED:\n{sources}\n"
            "Verify the AI-generated text against these sources."
        )
    return NO_SOURCES_INSTRUCTION


def build_prompt(ai_text: str, sources: str | None = None) -> str:
    """
    Build the instruction text shared by every provider attempt of a request.

    ai_text is embedded verbatim; sources only when non-blank.
    """
    return (
        f"{PROMPT_PREAMBLE}\n\n"
        f"{_sources_section(sources)}\n\n"
        f"AI-GENERATED TEXT:\n{ai_text}\n\n"
        f"{RESPONSE_SCHEMA}"
    )
