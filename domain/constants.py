"""Domain constants and type aliases"""
from enum import Enum
from typing import Literal

# Type aliases for senders and connectivity
Sender = Literal["user", "ai"]
NetworkStatus = Literal["online", "offline", "slow"]

# Sender constants
SENDER_USER: Sender = "user"
SENDER_AI: Sender = "ai"

# Network status constants
NETWORK_ONLINE: NetworkStatus = "online"
NETWORK_OFFLINE: NetworkStatus = "offline"
NETWORK_SLOW: NetworkStatus = "slow"


class ErrorKind(str, Enum):
    """Closed set of failure classes shared by client, retry and service layers"""
    NETWORK_ERROR = "NETWORK_ERROR"
    API_ERROR = "API_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


RETRYABLE_ERROR_KINDS = frozenset({
    ErrorKind.NETWORK_ERROR,
    ErrorKind.TIMEOUT_ERROR,
    ErrorKind.SERVICE_UNAVAILABLE,
    ErrorKind.API_ERROR,
})

# Message limits
MAX_MESSAGE_LENGTH = 500
MIN_MESSAGE_LENGTH = 2

# Rate limiting
RATE_LIMIT_MAX_REQUESTS = 10
RATE_LIMIT_WINDOW_SECONDS = 60.0
FAILURE_THRESHOLD = 3
FAILURE_COOLDOWN_SECONDS = 30.0

# Network monitoring
SLOW_RESPONSE_THRESHOLD_SECONDS = 2.0
PROBE_INTERVAL_SECONDS = 30.0

# Retry behaviour
SLOW_NETWORK_EXTRA_RETRIES = 2
SLOW_NETWORK_RETRY_CAP = 5
SLOW_NETWORK_DELAY_FACTOR = 1.5
MAX_BACKOFF_SECONDS = 10.0
MAX_JITTER_SECONDS = 1.0
HEALTH_CHECK_TIMEOUT_SECONDS = 10.0
