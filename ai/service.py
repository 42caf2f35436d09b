"""AI response façade: validation, rate limiting, retries and fallback in one call"""
import asyncio
import logging
import math
import time

import config
from ai.agent import TemplateAgent
from ai.client import RemoteAIClient
from ai.retry import RetryOrchestrator
from ai.validation import validate_user_input
from domain.constants import ErrorKind, HEALTH_CHECK_TIMEOUT_SECONDS, NETWORK_OFFLINE
from domain.errors import classify_error, should_retry_error
from domain.models import AIServiceResponse, ServiceError
from network.monitor import NetworkMonitor
from network.rate_limiter import RateLimiter
from portfolio.resume import DATA

logger = logging.getLogger(__name__)

CONTACT_EMAIL = DATA["contact"]["email"]

OFFLINE_MESSAGE = (
    "You appear to be offline. Please check your internet connection and try again."
)
TECHNICAL_DIFFICULTIES_MESSAGE = (
    "I apologize, but I'm experiencing technical difficulties right now. Please try again "
    f"in a moment, or feel free to contact me directly at {CONTACT_EMAIL} for immediate "
    "assistance."
)


def rate_limit_message(wait_seconds: float) -> str:
    wait = math.ceil(wait_seconds)
    if wait > 60:
        return (
            "Please wait a moment before sending another message. I want to make sure I can "
            "give you my full attention!"
        )
    return f"Rate limit exceeded. Please wait {wait} seconds before trying again."


def get_error_message(error: ServiceError | None) -> str:
    """Friendly banner text for a service error"""
    if error is None:
        return "I apologize, but something unexpected happened. Please try again!"

    if error.type == ErrorKind.NETWORK_ERROR:
        return (
            "It looks like there's a network connection issue. Please check your internet "
            "connection and try again - I'll be here waiting! If the problem persists, feel free "
            f"to reach out to me directly at {CONTACT_EMAIL}."
        )
    if error.type == ErrorKind.API_ERROR:
        return (
            "I'm having some technical difficulties at the moment. Please give me a moment and "
            "try again - I promise I'll do my best to help! If this keeps happening, don't "
            "hesitate to contact me directly."
        )
    if error.type == ErrorKind.TIMEOUT_ERROR:
        return (
            "That took longer than expected! This might be due to a slow connection. Please try "
            "again, maybe with a shorter message, and I'll respond more quickly. You can also "
            f"reach me at {CONTACT_EMAIL} if you prefer."
        )
    if error.type == ErrorKind.RATE_LIMIT_ERROR:
        return error.message
    if error.type == ErrorKind.INVALID_INPUT:
        if "harmful content" in error.message:
            return (
                "I noticed your message might contain some special characters that I can't "
                "process. Could you try rephrasing your question? I'm here to help!"
            )
        if "too short" in error.message:
            return (
                "Your message seems a bit short. Could you add a few more details so I can "
                "better understand what you'd like to know?"
            )
        if "too long" in error.message or "maximum length" in error.message:
            return (
                "Your message is quite long! Could you try breaking it into a shorter question? "
                "I work best with concise messages."
            )
        return (
            "I had trouble understanding your message. Could you try rephrasing it? I'm here to "
            "help with any questions about my experience, projects, or skills!"
        )
    if error.type == ErrorKind.SERVICE_UNAVAILABLE:
        return (
            "I'm temporarily having trouble with my AI responses, but I can still help! Feel free "
            "to try again in a moment, or reach out to me directly at "
            f"{CONTACT_EMAIL} if you'd like to continue our conversation right away."
        )
    return (
        "Oops! Something unexpected happened on my end. Please try again in a moment, or feel "
        f"free to contact me directly at {CONTACT_EMAIL} if the issue persists."
    )


class AIResponseService:
    """Produces exactly one outcome per call: AI reply, fallback reply or error"""

    def __init__(
        self,
        client: RemoteAIClient,
        rate_limiter: RateLimiter | None = None,
        network_monitor: NetworkMonitor | None = None,
        orchestrator: RetryOrchestrator | None = None,
        agent: TemplateAgent | None = None,
        max_retries: int | None = None,
    ) -> None:
        self.client = client
        self.rate_limiter = rate_limiter or RateLimiter()
        self.network_monitor = network_monitor or NetworkMonitor()
        self.orchestrator = orchestrator or RetryOrchestrator(
            self.network_monitor, self.rate_limiter
        )
        self.agent = agent or TemplateAgent()
        self.max_retries = config.AI_MAX_RETRIES if max_retries is None else max_retries

    async def generate_response(self, message: str, retry_count: int = 0) -> AIServiceResponse:
        """Answer one visitor message; never raises"""
        started = time.monotonic()

        def elapsed() -> float:
            return time.monotonic() - started

        def failure(kind: ErrorKind, text: str, retryable: bool) -> AIServiceResponse:
            return AIServiceResponse(
                success=False,
                error=ServiceError(type=kind, message=text, retryable=retryable),
                response_time=elapsed(),
            )

        try:
            network_status = await self.network_monitor.probe()
            if network_status == NETWORK_OFFLINE:
                return failure(ErrorKind.NETWORK_ERROR, OFFLINE_MESSAGE, True)

            validation = validate_user_input(message)
            if not validation.is_valid:
                return failure(ErrorKind.INVALID_INPUT, validation.error, False)

            if not self.rate_limiter.can_make_request():
                wait = self.rate_limiter.time_until_reset()
                logger.warning("Rate limit hit, retry in %.1fs: %s", wait, self.rate_limiter.get_stats())
                return failure(ErrorKind.RATE_LIMIT_ERROR, rate_limit_message(wait), True)

            # Re-validate right before the outbound call
            validation = validate_user_input(message)
            if not validation.is_valid:
                return failure(ErrorKind.INVALID_INPUT, validation.error, False)
            sanitized = validation.sanitized

            try:
                reply = await self.orchestrator.with_retry(lambda: self.client.call(sanitized))
                return AIServiceResponse(
                    success=True,
                    response=reply,
                    fallback_used=False,
                    response_time=elapsed(),
                )
            except Exception as ai_error:
                kind = classify_error(ai_error)
                logger.warning(
                    "AI service error: type=%s retry_count=%s network=%s message=%s...: %s",
                    kind.value,
                    retry_count,
                    network_status,
                    sanitized[:50],
                    ai_error,
                )

                if should_retry_error(kind) and retry_count < self.max_retries:
                    error = ServiceError(type=kind, message=str(ai_error), retryable=True)
                    return failure(kind, get_error_message(error), True)

                logger.info(
                    "Falling back to template response (intent=%s)",
                    self.agent.detect_intent(sanitized),
                )
                return AIServiceResponse(
                    success=True,
                    response=self.agent.get_enhanced_response(sanitized),
                    fallback_used=True,
                    response_time=elapsed(),
                )

        except Exception:
            logger.error(
                "Unexpected error in generate_response (retry_count=%s, message=%s...)",
                retry_count,
                str(message)[:50],
                exc_info=True,
            )
            try:
                return AIServiceResponse(
                    success=True,
                    response=self.agent.get_response(str(message)),
                    fallback_used=True,
                    response_time=elapsed(),
                )
            except Exception:
                logger.exception("Template fallback failed")
                return failure(
                    ErrorKind.SERVICE_UNAVAILABLE, TECHNICAL_DIFFICULTIES_MESSAGE, True
                )

    async def check_health(self) -> dict:
        """Single short call to the remote AI backend"""
        started = time.monotonic()
        try:
            await asyncio.wait_for(self.client.call("Hello"), HEALTH_CHECK_TIMEOUT_SECONDS)
            return {"available": True, "response_time": time.monotonic() - started}
        except asyncio.TimeoutError:
            return {
                "available": False,
                "response_time": time.monotonic() - started,
                "error": "Request timeout",
            }
        except Exception as e:
            return {
                "available": False,
                "response_time": time.monotonic() - started,
                "error": str(e) or "Unknown error",
            }
