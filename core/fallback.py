# core/fallback.py
import logging
from typing import Iterable, List
from config.settings import Settings
from core import providers
from core.local_fallback import build_local_fallback
from model.verification import ProviderErrorDetail, VerificationResult
from util.constants import PROVIDER_PRIORITY
from util.errors import ProviderError

logger = logging.getLogger(__name__)


async def verify_with_fallback(
    *,
    prompt: str,
    ai_text: str,
    sources: str | None,
    settings: Settings,
    exclude: Iterable[str] = (),
) -> VerificationResult:
    """
    Try providers in priority order, one at a time, until one answers.

    Provider failures are recorded, never raised. When every non-excluded
    provider has failed the local heuristic result is returned instead,
    carrying the recorded errors.
    """
    excluded = [str(m) for m in exclude]
    errors: List[ProviderErrorDetail] = []

    for provider in PROVIDER_PRIORITY:
        if provider.value in excluded:
            continue

        logger.info("Attempting model: %s", provider)
        try:
            result = await providers.call_provider(provider.value, prompt, settings)
        except ProviderError as e:
            logger.warning("%s failed: %s", provider, e.message)
            errors.append(ProviderErrorDetail(model=provider.value, error=e.message))
            continue
        except Exception as e:
            logger.exception("%s raised unexpectedly", provider)
            errors.append(ProviderErrorDetail(model=provider.value, error=str(e)))
            continue

        logger.info("Success with %s", provider)
        return result.model_copy(update={"modelUsed": provider.value})

    logger.warning(
        "All remote models failed (%d errors); using local fallback", len(errors)
    )
    return build_local_fallback(ai_text, sources, errors, excluded)
