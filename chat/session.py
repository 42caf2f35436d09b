"""Chat state machine for one visitor session"""
import logging
import uuid
from typing import Callable

from ai.agent import TemplateAgent
from ai.client import RemoteAIClient
from ai.retry import RetryOrchestrator
from ai.service import AIResponseService, TECHNICAL_DIFFICULTIES_MESSAGE, get_error_message
from ai.validation import validate_user_input
from domain.constants import (
    MAX_MESSAGE_LENGTH,
    NETWORK_OFFLINE,
    NetworkStatus,
    SENDER_AI,
    SENDER_USER,
    Sender,
)
from domain.models import ChatMessage, ChatState
from network.monitor import NetworkMonitor
from network.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

StateListener = Callable[[ChatState], None]


class ChatSession:
    """Owns conversation state and exposes the user-facing chat operations

    The widget is either collapsed or expanded; independently, the expanded
    view is idle, sending (is_loading) or showing an error banner. At most
    one send is in flight at a time; concurrent sends are dropped.
    """

    def __init__(
        self,
        service: AIResponseService,
        default_expanded: bool = False,
        agent: TemplateAgent | None = None,
    ) -> None:
        self.session_id = str(uuid.uuid4())
        self.service = service
        self.agent = agent or service.agent
        self.state = ChatState(
            is_expanded=default_expanded,
            network_status=service.network_monitor.get_status(),
        )
        self._listeners: list[StateListener] = []
        self._unsubscribe_network = service.network_monitor.subscribe(self._on_network_status)

    @classmethod
    def create(
        cls,
        client: RemoteAIClient,
        probe_url: str | None = None,
        default_expanded: bool = False,
    ) -> "ChatSession":
        """Build a session with its own rate limiter and network monitor"""
        rate_limiter = RateLimiter()
        network_monitor = NetworkMonitor(probe_url=probe_url)
        orchestrator = RetryOrchestrator(network_monitor, rate_limiter)
        service = AIResponseService(
            client,
            rate_limiter=rate_limiter,
            network_monitor=network_monitor,
            orchestrator=orchestrator,
        )
        return cls(service, default_expanded=default_expanded)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.state)
            except Exception:
                logger.exception("Chat state listener failed")

    def _on_network_status(self, status: NetworkStatus) -> None:
        self.state.network_status = status
        self._emit()

    def close(self) -> None:
        """Detach from the network monitor; the session is discarded afterwards"""
        self._unsubscribe_network()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------

    @property
    def is_sending(self) -> bool:
        return self.state.is_loading

    def _add_message(self, content: str, sender: Sender) -> ChatMessage:
        message = ChatMessage.create(content, sender)
        if not message.is_valid():
            raise ValueError("Failed to create valid message")
        self.state.messages.append(message)
        return message

    def _set_error(
        self,
        error: str | None = None,
        can_retry: bool = False,
        last_failed_message: str | None = None,
    ) -> None:
        self.state.error = error
        self.state.can_retry = can_retry
        self.state.last_failed_message = last_failed_message

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------

    def expand(self) -> None:
        self.state.is_expanded = True
        self._emit()

    def collapse(self) -> None:
        self.state.is_expanded = False
        self._emit()

    def update_input(self, text: str) -> None:
        """Update the draft; typing dismisses any error banner"""
        if self.state.error:
            self._set_error(None)
        self.state.current_input = text[:MAX_MESSAGE_LENGTH]
        self._emit()

    def dismiss_error(self) -> None:
        self._set_error(None)
        self._emit()

    async def send(self, text: str) -> None:
        """Send a visitor message and append the reply

        No-op while another send is in flight or when text is blank.
        """
        if self.state.is_loading or not text or not text.strip():
            return

        trimmed = text.strip()

        if self.state.network_status == NETWORK_OFFLINE:
            self._set_error(
                "You appear to be offline. Please check your internet connection and try again.",
                True,
                trimmed,
            )
            self._emit()
            return

        try:
            self._set_error(None)

            validation = validate_user_input(trimmed)
            if not validation.is_valid:
                self._set_error(validation.error, False)
                return

            sanitized = validation.sanitized
            self._add_message(sanitized, SENDER_USER)
            self.state.current_input = ""
            self.state.is_loading = True
            self._emit()

            retry_count = self.state.retry_count
            result = await self.service.generate_response(sanitized, retry_count)

            if result.success and result.response:
                self._add_message(result.response, SENDER_AI)
                self.state.retry_count = 0
                logger.info(
                    "AI response generated in %.0fms (fallback=%s, length=%s, retry_count=%s, network=%s)",
                    result.response_time * 1000,
                    result.fallback_used,
                    len(sanitized),
                    retry_count,
                    self.state.network_status,
                )
            else:
                error_message = get_error_message(result.error)
                if result.error is not None and result.error.retryable:
                    self._set_error(error_message, True, sanitized)
                else:
                    self._add_message(error_message, SENDER_AI)
                    self._set_error(None)
                logger.warning(
                    "AI service error: %s (retry_count=%s, network=%s)",
                    result.error,
                    retry_count,
                    self.state.network_status,
                )

        except Exception:
            logger.error(
                "Unexpected error in send (message=%s..., retry_count=%s)",
                trimmed[:50],
                self.state.retry_count,
                exc_info=True,
            )
            try:
                self._add_message(self.agent.get_response(trimmed), SENDER_AI)
                self._set_error(None)
            except Exception:
                logger.exception("Template fallback failed")
                self._set_error(TECHNICAL_DIFFICULTIES_MESSAGE, True, trimmed)
        finally:
            self.state.is_loading = False
            self._emit()

    async def retry(self) -> None:
        """Resend the last failed message with an incremented retry counter"""
        failed = self.state.last_failed_message
        if not failed or self.state.is_loading:
            return

        self._set_error(None)
        self.state.retry_count += 1
        await self.send(failed)
