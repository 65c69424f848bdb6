# controller/verification_controller.py
from fastapi import APIRouter, Depends, status
from model.api import HealthResponse, VerifyRequest, VerifyResponse
from service.verification_service import VerificationService
from util.constants import InternalURIs
from util.deps import get_verification_service

verification_router = APIRouter()


@verification_router.get(InternalURIs.HEALTH, response_model=HealthResponse)
async def health(
    service: VerificationService = Depends(get_verification_service),
) -> HealthResponse:
    return service.health()


@verification_router.post(
    InternalURIs.VERIFY,
    response_model=VerifyResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def verify(
    payload: VerifyRequest,
    service: VerificationService = Depends(get_verification_service),
) -> VerifyResponse:
    return await service.verify(payload)
