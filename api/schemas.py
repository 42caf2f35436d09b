"""Pydantic response models for the HTTP API"""

from pydantic import BaseModel


class ChatSuccess(BaseModel):
    """Successful reply from POST /api/chat"""

    response: str
    success: bool = True


class ChatFailure(BaseModel):
    """Error body from POST /api/chat"""

    error: str
    success: bool = False


class HealthStatus(BaseModel):
    """Result of probing the remote AI backend"""

    available: bool
    response_time: float
    error: str | None = None
