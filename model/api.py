# model/api.py
from pydantic import BaseModel
from model.verification import VerificationResult
from util.constants import AUTO_MODEL


class VerifyRequest(BaseModel):
    # Blank/missing aiText is rejected by the service with a 400, not here
    aiText: str | None = None
    sources: str | None = None
    model: str | None = AUTO_MODEL


class VerifyResponse(VerificationResult):
    modelUsed: str
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    message: str
    availableModels: dict[str, bool]


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
