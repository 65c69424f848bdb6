# util/deps.py
from config.settings import settings
from service.verification_service import VerificationService


def get_verification_service() -> VerificationService:
    return VerificationService(settings)
