"""Unit tests for error classification"""
import pytest

from domain.constants import ErrorKind
from domain.errors import AIServiceException, classify_error, should_retry_error


@pytest.mark.unit
class TestClassifyError:
    """Test classify_error"""

    def test_own_exceptions_keep_kind(self):
        """Test that an AIServiceException is not reclassified from its text"""
        error = AIServiceException(ErrorKind.RATE_LIMIT_ERROR, "network quota")
        assert classify_error(error) == ErrorKind.RATE_LIMIT_ERROR

    @pytest.mark.parametrize("message, kind", [
        ("Failed to fetch", ErrorKind.NETWORK_ERROR),
        ("Connection reset", ErrorKind.NETWORK_ERROR),
        ("Request timed out", ErrorKind.TIMEOUT_ERROR),
        ("timeout after 30s", ErrorKind.TIMEOUT_ERROR),
        ("429 Too Many Requests", ErrorKind.RATE_LIMIT_ERROR),
        ("Quota exceeded", ErrorKind.RATE_LIMIT_ERROR),
        ("Unauthorized", ErrorKind.INVALID_INPUT),
        ("Invalid argument", ErrorKind.INVALID_INPUT),
        ("503 Service Unavailable", ErrorKind.SERVICE_UNAVAILABLE),
        ("Internal server error", ErrorKind.SERVICE_UNAVAILABLE),
        ("something odd", ErrorKind.API_ERROR),
    ])
    def test_foreign_exceptions(self, message, kind):
        """Test message-based classification of other exceptions"""
        assert classify_error(RuntimeError(message)) == kind

    def test_network_checked_before_timeout(self):
        """Test that the first matching class wins"""
        assert classify_error(RuntimeError("network timeout")) == ErrorKind.NETWORK_ERROR


@pytest.mark.unit
class TestShouldRetry:
    """Test should_retry_error"""

    @pytest.mark.parametrize("kind", [
        ErrorKind.NETWORK_ERROR,
        ErrorKind.TIMEOUT_ERROR,
        ErrorKind.SERVICE_UNAVAILABLE,
        ErrorKind.API_ERROR,
    ])
    def test_retryable(self, kind):
        assert should_retry_error(kind) is True
        assert AIServiceException(kind, "x").retryable is True

    @pytest.mark.parametrize("kind", [ErrorKind.RATE_LIMIT_ERROR, ErrorKind.INVALID_INPUT])
    def test_not_retryable(self, kind):
        assert should_retry_error(kind) is False
