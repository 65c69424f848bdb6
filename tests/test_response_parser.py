"""Unit tests for the model response parser."""

import json

import pytest

from core.response_parser import (
    PARSE_FAILURE_ERROR,
    PARSE_FAILURE_SUMMARY,
    parse_model_response,
    strip_code_fences,
)
from model.verification import ClaimStatus, OverallVerdict, Severity


class TestStripCodeFences:
    def test_language_tagged(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare(self):
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_text_trimmed(self):
        assert strip_code_fences("  {}  ") == "{}"


class TestParseModelResponse:
    def test_fenced_json(self, verified_text):
        raw = f"```json\n{verified_text}\n```"

        result = parse_model_response(raw)

        assert result.overallVerdict == OverallVerdict.verified
        assert result.confidenceScore == 92
        assert result.claims[0].status == ClaimStatus.verified
        assert result.claims[0].sourceMatch is True
        assert result.error is None
        assert result.raw is None

    def test_minimal_object_gets_defaults(self):
        result = parse_model_response('{"overallVerdict": "hallucination"}')

        assert result.overallVerdict == OverallVerdict.hallucination
        assert result.confidenceScore == 0
        assert result.claims == []
        assert result.hallucinations == []
        assert result.recommendations == []

    def test_scores_are_rounded_and_clamped(self):
        raw = json.dumps(
            {
                "overallVerdict": "partial",
                "confidenceScore": 140,
                "claims": [{"claim": "c", "status": "false", "confidence": 71.6}],
                "hallucinations": [{"text": "c", "reason": "r", "severity": "high"}],
            }
        )

        result = parse_model_response(raw)

        assert result.confidenceScore == 100
        assert result.claims[0].confidence == 72
        assert result.claims[0].status == ClaimStatus.false
        assert result.hallucinations[0].severity == Severity.high

    def test_not_json(self):
        result = parse_model_response("not json at all")

        assert result.overallVerdict == OverallVerdict.error
        assert result.confidenceScore == 0
        assert result.summary == PARSE_FAILURE_SUMMARY
        assert result.error == PARSE_FAILURE_ERROR
        assert result.raw == "not json at all"

    def test_raw_is_truncated(self):
        raw = "x" * 5000

        result = parse_model_response(raw)

        assert result.overallVerdict == OverallVerdict.error
        assert len(result.raw) == 1000

    def test_json_array_is_a_parse_failure(self):
        result = parse_model_response("[1, 2, 3]")

        assert result.overallVerdict == OverallVerdict.error

    def test_schema_mismatch_is_a_parse_failure(self):
        raw = json.dumps({"overallVerdict": "maybe", "confidenceScore": 10})

        result = parse_model_response(raw)

        assert result.overallVerdict == OverallVerdict.error
        assert result.raw == raw

    def test_empty_and_none(self):
        assert parse_model_response("").overallVerdict == OverallVerdict.error
        assert parse_model_response(None).overallVerdict == OverallVerdict.error

    @pytest.mark.parametrize(
        "raw",
        [
            '{"overallVerdict": "verified", "confidenceScore": 1e999}',
            '{"overallVerdict": "verified", "confidenceScore": Infinity}',
            '{"overallVerdict": "verified", "confidenceScore": "inf"}',
            '{"overallVerdict": "verified", "claims": '
            '[{"claim": "c", "status": "verified", "confidence": -Infinity}]}',
            '{"overallVerdict": "verified", "confidenceScore": NaN}',
        ],
    )
    def test_non_finite_scores_are_a_parse_failure(self, raw):
        result = parse_model_response(raw)

        assert result.overallVerdict == OverallVerdict.error
        assert result.confidenceScore == 0
        assert result.raw == raw
