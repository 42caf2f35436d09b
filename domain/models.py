"""Domain models for the portfolio chat system"""
import random
import string
import time
from dataclasses import dataclass, field, asdict

from .constants import ErrorKind, NetworkStatus, Sender, NETWORK_ONLINE

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_message_id(sender: Sender) -> str:
    """Build a unique message id from generation time, sender and a random suffix"""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{sender}-{int(time.time() * 1000)}-{suffix}"


@dataclass(frozen=True)
class ChatMessage:
    """One conversational turn. Never mutated once appended to a session."""
    id: str
    content: str
    sender: Sender
    timestamp: float
    is_loading: bool = False
    is_error: bool = False
    can_retry: bool = False
    original_message: str | None = None

    @classmethod
    def create(cls, content: str, sender: Sender) -> "ChatMessage":
        """Create a message with a fresh id and timestamp"""
        return cls(
            id=generate_message_id(sender),
            content=content.strip(),
            sender=sender,
            timestamp=time.time(),
        )

    def is_valid(self) -> bool:
        return bool(self.id and self.content and self.timestamp) and self.sender in ("user", "ai")


@dataclass
class ChatState:
    """Aggregate state of one chat session

    Fields:
    - is_expanded: whether the widget is open
    - messages: conversation history in insertion order
    - current_input: draft text in the input box
    - is_loading: a send is in flight
    - error: user-facing error banner text, if any
    - can_retry: the banner offers a retry control
    - last_failed_message: sanitized text to resend on retry
    - retry_count: user-level retries since the last successful reply
    - network_status: connectivity badge
    """
    is_expanded: bool = False
    messages: list[ChatMessage] = field(default_factory=list)
    current_input: str = ""
    is_loading: bool = False
    error: str | None = None
    can_retry: bool = False
    last_failed_message: str | None = None
    retry_count: int = 0
    network_status: NetworkStatus = NETWORK_ONLINE

    def sorted_messages(self) -> list[ChatMessage]:
        """Messages ordered by timestamp for display"""
        return sorted(self.messages, key=lambda m: m.timestamp)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["messages"] = [asdict(m) for m in self.sorted_messages()]
        return data


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating raw user input"""
    is_valid: bool
    error: str | None = None
    sanitized: str | None = None


@dataclass(frozen=True)
class ServiceError:
    """Error detail attached to a failed AI service response"""
    type: ErrorKind
    message: str
    retryable: bool


@dataclass(frozen=True)
class AIServiceResponse:
    """Result of one generate_response call"""
    success: bool
    response: str | None = None
    error: ServiceError | None = None
    fallback_used: bool = False
    response_time: float = 0.0


@dataclass(frozen=True)
class ProjectContext:
    name: str
    description: str
    technologies: list[str]
    status: str
    dates: str
    website: str | None = None
    source: str | None = None


@dataclass(frozen=True)
class EducationContext:
    institution: str
    degree: str
    period: str
    description: str | None = None


@dataclass(frozen=True)
class WorkContext:
    company: str
    title: str
    location: str
    period: str
    description: str


@dataclass(frozen=True)
class ContactContext:
    email: str
    phone: str
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None


@dataclass(frozen=True)
class ProfileContext:
    """Read-only projection of the static profile data"""
    name: str
    role: str
    location: str
    experience: str
    skills: list[str]
    projects: list[ProjectContext]
    education: list[EducationContext]
    work: list[WorkContext]
    contact: ContactContext
    personality: str
    summary: str
