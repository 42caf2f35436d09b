"""Unit tests for domain models"""
import re

import pytest

from domain.constants import ErrorKind
from domain.models import (
    AIServiceResponse,
    ChatMessage,
    ChatState,
    ServiceError,
    ValidationResult,
    generate_message_id,
)


@pytest.mark.unit
class TestChatMessage:
    """Test ChatMessage dataclass"""

    def test_create(self):
        """Test creating a message with id and timestamp"""
        message = ChatMessage.create("  Hello there  ", "user")
        assert message.content == "Hello there"
        assert message.sender == "user"
        assert message.timestamp > 0
        assert message.is_loading is False
        assert message.is_error is False
        assert message.is_valid() is True

    def test_id_format(self):
        """Test that ids carry sender, millisecond time and a random suffix"""
        message_id = generate_message_id("ai")
        assert re.fullmatch(r"ai-\d{13,}-[a-z0-9]{9}", message_id)

    def test_ids_unique(self):
        """Test that consecutive ids differ"""
        ids = {ChatMessage.create("hi there", "user").id for _ in range(100)}
        assert len(ids) == 100

    def test_frozen(self):
        """Test that messages cannot be mutated"""
        message = ChatMessage.create("hi there", "user")
        with pytest.raises(AttributeError):
            message.content = "changed"

    @pytest.mark.parametrize("content, sender", [("   ", "user"), ("hello", "bot")])
    def test_invalid_messages(self, content, sender):
        """Test that blank content or an unknown sender is invalid"""
        assert ChatMessage.create(content, sender).is_valid() is False


@pytest.mark.unit
class TestChatState:
    """Test ChatState dataclass"""

    def test_defaults(self):
        """Test the initial state"""
        state = ChatState()
        assert state.is_expanded is False
        assert state.messages == []
        assert state.current_input == ""
        assert state.error is None
        assert state.retry_count == 0
        assert state.network_status == "online"

    def test_messages_not_shared(self):
        """Test that each state owns its own message list"""
        first, second = ChatState(), ChatState()
        first.messages.append(ChatMessage.create("hi there", "user"))
        assert second.messages == []

    def test_sorted_messages(self):
        """Test that display order follows timestamps"""
        late = ChatMessage(id="user-2-a", content="second", sender="user", timestamp=20.0)
        early = ChatMessage(id="ai-1-b", content="first", sender="ai", timestamp=10.0)
        state = ChatState(messages=[late, early])
        assert [m.content for m in state.sorted_messages()] == ["first", "second"]
        assert state.messages == [late, early]

    def test_to_dict(self):
        """Test that state serializes to plain data"""
        state = ChatState(is_expanded=True, messages=[ChatMessage.create("hi there", "user")])
        data = state.to_dict()
        assert data["is_expanded"] is True
        assert data["messages"][0]["content"] == "hi there"
        assert data["messages"][0]["sender"] == "user"


@pytest.mark.unit
class TestResults:
    """Test result value objects"""

    def test_validation_result(self):
        """Test ValidationResult defaults"""
        result = ValidationResult(True, sanitized="hello")
        assert result.error is None
        assert result.sanitized == "hello"

    def test_service_response(self):
        """Test AIServiceResponse carrying an error"""
        error = ServiceError(type=ErrorKind.TIMEOUT_ERROR, message="Request timeout", retryable=True)
        response = AIServiceResponse(success=False, error=error)
        assert response.response is None
        assert response.fallback_used is False
        assert response.error.type == "TIMEOUT_ERROR"
