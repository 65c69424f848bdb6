# util/errors.py
from util.enums import ErrorMessage


class AppError(Exception):
    """Caller-visible error carrying the HTTP status to respond with."""

    def __init__(self, message: str, http_status: int) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status


class ClientInputError(AppError):
    def __init__(self, message: str = ErrorMessage.AI_TEXT_REQUIRED.value.message) -> None:
        super().__init__(message, ErrorMessage.AI_TEXT_REQUIRED.value.http_status)


class ProviderError(Exception):
    """
    A single provider attempt failed.

    Never surfaced to the caller: the fallback loop records it and moves on.
    """

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = str(provider)
        self.message = message


class CredentialMissingError(ProviderError):
    pass


class ProviderTransportError(ProviderError):
    pass
