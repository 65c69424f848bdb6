# service/verification_service.py
import logging
from datetime import datetime, timezone
from config.settings import Settings
from core import providers
from core.fallback import verify_with_fallback
from core.prompt_builder import build_prompt
from model.api import HealthResponse, VerifyRequest, VerifyResponse
from model.verification import VerificationResult
from util.constants import AUTO_MODEL
from util.errors import ClientInputError, ProviderError

logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class VerificationService:
    """
    Flow:
    - Reject blank text before touching any provider.
    - Build the prompt once per request.
    - auto: walk the provider priority list (local heuristic if all fail).
    - named model: try it directly; on failure walk the list without it.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="ok",
            message="Multi-AI Verify Server Running",
            availableModels=self._settings.available_models(),
        )

    async def verify(self, payload: VerifyRequest) -> VerifyResponse:
        ai_text = payload.aiText or ""
        if not ai_text.strip():
            raise ClientInputError()

        prompt = build_prompt(ai_text, payload.sources)
        model = payload.model or AUTO_MODEL

        if model == AUTO_MODEL:
            result = await self._fallback(prompt, ai_text, payload.sources, exclude=())
        else:
            try:
                result = await providers.call_provider(model, prompt, self._settings)
                result = result.model_copy(update={"modelUsed": model})
            except ProviderError as e:
                logger.warning("Model %s failed, falling back: %s", model, e.message)
                result = await self._fallback(
                    prompt, ai_text, payload.sources, exclude=(model,)
                )
            except Exception:
                logger.exception("Model %s raised unexpectedly, falling back", model)
                result = await self._fallback(
                    prompt, ai_text, payload.sources, exclude=(model,)
                )

        return VerifyResponse(
            **result.model_dump(exclude={"modelUsed"}),
            modelUsed=result.modelUsed,
            timestamp=_utc_timestamp(),
        )

    async def _fallback(
        self, prompt: str, ai_text: str, sources: str | None, exclude: tuple[str, ...]
    ) -> VerificationResult:
        return await verify_with_fallback(
            prompt=prompt,
            ai_text=ai_text,
            sources=sources,
            settings=self._settings,
            exclude=exclude,
        )
