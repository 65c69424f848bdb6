# core/providers.py
from typing import Any, Awaitable, Callable, Final
import httpx
from config.settings import Settings
from core.response_parser import parse_model_response
from model.verification import VerificationResult
from util.constants import ExternalURIs, MAX_ERROR_BODY_CHARS
from util.enums import Provider
from util.errors import CredentialMissingError, ProviderError, ProviderTransportError

ProviderCall = Callable[[str, Settings], Awaitable[VerificationResult]]

EMPTY_REPLY: Final[str] = "{}"

_LABELS: Final[dict[Provider, str]] = {
    Provider.CLAUDE: "Claude",
    Provider.GEMINI: "Gemini",
    Provider.GROQ: "Groq",
    Provider.OPENROUTER: "OpenRouter",
}


def _require_key(settings: Settings, provider: Provider) -> str:
    key = settings.api_key(provider)
    if key is None:
        raise CredentialMissingError(provider, f"{provider.name}_API_KEY missing")
    return key


def _timeout(settings: Settings) -> httpx.Timeout:
    return httpx.Timeout(
        settings.PROVIDER_TIMEOUT_SECONDS,
        connect=settings.PROVIDER_CONNECT_TIMEOUT_SECONDS,
    )


async def _post_json(
    provider: Provider,
    url: str,
    *,
    settings: Settings,
    payload: dict[str, Any],
    headers: dict[str, str] | None = None,
    params: dict[str, str] | None = None,
) -> Any:
    """
    Single POST to a provider. Any non-2xx status, transport fault or
    non-JSON envelope becomes a ProviderTransportError.
    """
    label = _LABELS[provider]
    try:
        async with httpx.AsyncClient(timeout=_timeout(settings)) as client:
            res = await client.post(
                url,
                headers={"content-type": "application/json", **(headers or {})},
                params=params,
                json=payload,
            )
    except httpx.HTTPError as e:
        # str(e) only; the request URL may carry a query-string key
        raise ProviderTransportError(
            provider, f"{label} API request failed: {type(e).__name__}: {e}"
        ) from e

    if res.status_code // 100 != 2:
        raise ProviderTransportError(
            provider,
            f"{label} API error: {res.status_code} - {res.text[:MAX_ERROR_BODY_CHARS]}",
        )

    try:
        return res.json()
    except ValueError as e:
        raise ProviderTransportError(
            provider, f"{label} API returned a non-JSON response"
        ) from e


def _reply_text(data: Any, *path: str | int) -> str:
    """Follow `path` into the response envelope; fall back to an empty object."""
    node = data
    for step in path:
        try:
            node = node[step]
        except (KeyError, IndexError, TypeError):
            return EMPTY_REPLY
    return node if isinstance(node, str) and node else EMPTY_REPLY


def _chat_payload(model: str, prompt: str, settings: Settings) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": settings.PROVIDER_TEMPERATURE,
    }


async def call_claude(prompt: str, settings: Settings) -> VerificationResult:
    key = _require_key(settings, Provider.CLAUDE)
    payload = {
        "model": settings.CLAUDE_MODEL,
        "max_tokens": settings.CLAUDE_MAX_TOKENS,
        "temperature": settings.PROVIDER_TEMPERATURE,
        "messages": [{"role": "user", "content": prompt}],
    }
    data = await _post_json(
        Provider.CLAUDE,
        ExternalURIs.CLAUDE_MESSAGES,
        settings=settings,
        payload=payload,
        headers={"x-api-key": key, "anthropic-version": settings.ANTHROPIC_VERSION},
    )
    return parse_model_response(_reply_text(data, "content", 0, "text"))


async def call_gemini(prompt: str, settings: Settings) -> VerificationResult:
    key = _require_key(settings, Provider.GEMINI)
    payload = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {"temperature": settings.PROVIDER_TEMPERATURE},
    }
    data = await _post_json(
        Provider.GEMINI,
        ExternalURIs.GEMINI_GENERATE.format(model=settings.GEMINI_MODEL),
        settings=settings,
        payload=payload,
        params={"key": key},
    )
    return parse_model_response(
        _reply_text(data, "candidates", 0, "content", "parts", 0, "text")
    )


async def call_groq(prompt: str, settings: Settings) -> VerificationResult:
    key = _require_key(settings, Provider.GROQ)
    data = await _post_json(
        Provider.GROQ,
        ExternalURIs.GROQ_CHAT,
        settings=settings,
        payload=_chat_payload(settings.GROQ_MODEL, prompt, settings),
        headers={"Authorization": f"Bearer {key}"},
    )
    return parse_model_response(_reply_text(data, "choices", 0, "message", "content"))


async def call_openrouter(prompt: str, settings: Settings) -> VerificationResult:
    key = _require_key(settings, Provider.OPENROUTER)
    data = await _post_json(
        Provider.OPENROUTER,
        ExternalURIs.OPENROUTER_CHAT,
        settings=settings,
        payload=_chat_payload(settings.OPENROUTER_MODEL, prompt, settings),
        headers={"Authorization": f"Bearer {key}"},
    )
    return parse_model_response(_reply_text(data, "choices", 0, "message", "content"))


PROVIDER_CALLS: Final[dict[Provider, ProviderCall]] = {
    Provider.CLAUDE: call_claude,
    Provider.GEMINI: call_gemini,
    Provider.GROQ: call_groq,
    Provider.OPENROUTER: call_openrouter,
}


async def call_provider(name: str, prompt: str, settings: Settings) -> VerificationResult:
    """Route `prompt` to the adapter for `name`. Raises ProviderError on any failure."""
    try:
        provider = Provider(name)
    except ValueError:
        choices = " | ".join(p.value for p in Provider)
        raise ProviderError(
            name, f"Invalid model: {name}. Use: {choices} | auto"
        ) from None
    return await PROVIDER_CALLS[provider](prompt, settings)
