# core/response_parser.py
import json
import logging
import re
from typing import Final
from pydantic import ValidationError
from model.verification import OverallVerdict, VerificationResult
from util.constants import MAX_RAW_RESPONSE_CHARS

logger = logging.getLogger(__name__)

_FENCE: Final[re.Pattern[str]] = re.compile(r"```(?:json)?", re.IGNORECASE)

PARSE_FAILURE_ERROR: Final[str] = "Failed to parse model response"
PARSE_FAILURE_SUMMARY: Final[str] = "Failed to parse response from AI model"


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", text).strip()


def parse_failure(raw_text: str) -> VerificationResult:
    return VerificationResult(
        overallVerdict=OverallVerdict.error,
        confidenceScore=0,
        summary=PARSE_FAILURE_SUMMARY,
        error=PARSE_FAILURE_ERROR,
        raw=raw_text[:MAX_RAW_RESPONSE_CHARS],
    )


def parse_model_response(raw_text: str | None) -> VerificationResult:
    """
    Turn free-form model output into a VerificationResult.

    Never raises: anything that is not a JSON object matching the result
    schema comes back as an `error` verdict with the raw text kept (truncated).
    """
    text = raw_text if isinstance(raw_text, str) else ""
    try:
        data = json.loads(strip_code_fences(text))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return VerificationResult.model_validate(data)
    except (ValueError, ValidationError, ArithmeticError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError
        logger.warning("Unparseable model response (%s)", type(e).__name__)
        return parse_failure(text)
