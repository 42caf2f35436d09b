"""Exceptions crossing the AI client, retry and service seams"""
from .constants import ErrorKind, RETRYABLE_ERROR_KINDS


class AIServiceException(Exception):
    """Failure of a remote AI call, already classified into an ErrorKind"""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_ERROR_KINDS


def classify_error(error: BaseException) -> ErrorKind:
    """Map an exception to an ErrorKind

    Exceptions raised by our own client already carry their kind. Anything
    else is classified from its message text.
    """
    if isinstance(error, AIServiceException):
        return error.kind

    message = str(error).lower()

    if "network" in message or "fetch" in message or "connection" in message:
        return ErrorKind.NETWORK_ERROR
    if "timeout" in message or "timed out" in message:
        return ErrorKind.TIMEOUT_ERROR
    if "rate limit" in message or "too many requests" in message or "quota" in message:
        return ErrorKind.RATE_LIMIT_ERROR
    if (
        "api key" in message
        or "unauthorized" in message
        or "forbidden" in message
        or "invalid" in message
    ):
        return ErrorKind.INVALID_INPUT
    if "service unavailable" in message or "server error" in message:
        return ErrorKind.SERVICE_UNAVAILABLE
    return ErrorKind.API_ERROR


def should_retry_error(kind: ErrorKind) -> bool:
    """True for transient error classes worth another attempt"""
    return kind in RETRYABLE_ERROR_KINDS
