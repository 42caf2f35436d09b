"""Pytest configuration and shared fixtures for all tests"""
import pytest
import httpx
from unittest.mock import AsyncMock

from ai.agent import TemplateAgent
from ai.client import RemoteAIClient
from ai.retry import RetryOrchestrator
from ai.service import AIResponseService
from chat.session import ChatSession
from domain.constants import ErrorKind
from domain.errors import AIServiceException
from network.monitor import NetworkMonitor
from network.rate_limiter import RateLimiter
from portfolio.context import prepare_ai_context
from websocket.connection_manager import ConnectionManager

pytest_plugins = ("pytest_asyncio",)


class FakeClock:
    """Manually advanced time source"""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Async sleep replacement that records requested delays without waiting"""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def gemini_reply(text: str) -> dict:
    """Minimal generateContent response body"""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _failing_client(kind: ErrorKind = ErrorKind.NETWORK_ERROR, message: str = "Network error") -> AsyncMock:
    """RemoteAIClient stand-in whose call() always raises"""
    client = AsyncMock(spec=RemoteAIClient)
    client.call.side_effect = AIServiceException(kind, message)
    return client


def _replying_client(text: str = "Hi, I'm Fazlul!") -> AsyncMock:
    client = AsyncMock(spec=RemoteAIClient)
    client.call.return_value = text
    return client


@pytest.fixture
def failing_client():
    return _failing_client


@pytest.fixture
def replying_client():
    return _replying_client


@pytest.fixture
def gemini_body():
    return gemini_reply


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def profile_context():
    return prepare_ai_context()


@pytest.fixture
def template_agent():
    return TemplateAgent()


@pytest.fixture
def rate_limiter():
    return RateLimiter()


@pytest.fixture
def network_monitor():
    """Monitor without a probe URL: status only follows connectivity events"""
    return NetworkMonitor()


@pytest.fixture
def orchestrator(network_monitor, rate_limiter, recording_sleep):
    """Retry orchestrator with no jitter and instant sleeps"""
    return RetryOrchestrator(
        network_monitor,
        rate_limiter,
        max_retries=3,
        base_delay=0.01,
        timeout=5.0,
        max_jitter=0.0,
        sleep=recording_sleep,
    )


@pytest.fixture
def make_service(network_monitor, rate_limiter, orchestrator):
    """Factory building an AIResponseService around a given client"""
    def build(client) -> AIResponseService:
        return AIResponseService(
            client,
            rate_limiter=rate_limiter,
            network_monitor=network_monitor,
            orchestrator=orchestrator,
            max_retries=3,
        )
    return build


@pytest.fixture
def make_session(make_service):
    """Factory building a ChatSession around a given client"""
    def build(client, default_expanded: bool = False) -> ChatSession:
        return ChatSession(make_service(client), default_expanded=default_expanded)
    return build


@pytest.fixture
def mock_transport_client():
    """Factory building a RemoteAIClient whose HTTP calls go to a handler function"""
    def build(handler, api_key: str = "test-key") -> RemoteAIClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return RemoteAIClient(
            api_key=api_key,
            model="gemini-test",
            api_base="https://gemini.test/v1beta",
            http_client=http_client,
            timeout=5.0,
        )
    return build


@pytest.fixture
def connection_manager():
    """Create a ConnectionManager instance for testing"""
    return ConnectionManager()


@pytest.fixture
def mock_websocket():
    """Create a mock WebSocket for testing"""
    ws = AsyncMock()
    ws.accept = AsyncMock()
    ws.send_text = AsyncMock()
    ws.close = AsyncMock()
    return ws
