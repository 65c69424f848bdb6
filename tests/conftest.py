"""
Pytest Fixtures
===============

Shared fixtures for all test modules.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from config.settings import Settings


VERIFIED_REPLY: dict[str, Any] = {
    "overallVerdict": "verified",
    "confidenceScore": 92,
    "summary": "The text matches the provided sources.",
    "claims": [
        {
            "claim": "The Eiffel Tower was completed in 1889.",
            "status": "verified",
            "confidence": 95,
            "evidence": "Built for the 1889 Exposition Universelle.",
            "sourceMatch": True,
        }
    ],
    "hallucinations": [],
    "recommendations": ["No changes needed."],
}


def make_settings(**keys: str | None) -> Settings:
    """Settings with every provider key explicit, so the host environment never leaks in."""
    values: dict[str, Any] = {
        "CLAUDE_API_KEY": None,
        "GEMINI_API_KEY": None,
        "GROQ_API_KEY": None,
        "OPENROUTER_API_KEY": None,
    }
    values.update(keys)
    return Settings(**values)


def make_response(
    status_code: int = 200, json_body: Any = None, text: str | None = None
) -> MagicMock:
    """Stand-in for an httpx.Response."""
    res = MagicMock()
    res.status_code = status_code
    if json_body is None:
        res.json.side_effect = ValueError("No JSON object could be decoded")
        res.text = text or ""
    else:
        res.json.return_value = json_body
        res.text = text if text is not None else json.dumps(json_body)
    return res


@pytest.fixture
def all_keys_settings() -> Settings:
    return make_settings(
        CLAUDE_API_KEY="claude-key",
        GEMINI_API_KEY="gemini-key",
        GROQ_API_KEY="groq-key",
        OPENROUTER_API_KEY="openrouter-key",
    )


@pytest.fixture
def no_keys_settings() -> Settings:
    return make_settings()


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient used by the provider adapters; yields the client."""
    with patch("core.providers.httpx.AsyncClient") as client_cls:
        client = MagicMock()
        client.post = AsyncMock()
        client_cls.return_value.__aenter__.return_value = client
        client_cls.return_value.__aexit__.return_value = False
        yield client


@pytest.fixture
def verified_reply() -> dict[str, Any]:
    return json.loads(json.dumps(VERIFIED_REPLY))


@pytest.fixture
def verified_text() -> str:
    return json.dumps(VERIFIED_REPLY)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def response_factory():
    return make_response
