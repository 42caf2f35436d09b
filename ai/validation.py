"""Heuristic validation and sanitization of visitor messages

This is a fast-path filter, not a security boundary. Anything rendered or
forwarded still needs escaping at the point of use.
"""
import re

from domain.constants import MAX_MESSAGE_LENGTH, MIN_MESSAGE_LENGTH
from domain.models import ValidationResult

# Content that is rejected outright
UNSAFE_PATTERNS = [
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"data:text/html", re.IGNORECASE),
    re.compile(r"<script[\s\S]*?>[\s\S]*?</script>", re.IGNORECASE),
    re.compile(r"<script\b", re.IGNORECASE),
    re.compile(r"<iframe[\s\S]*?>[\s\S]*?</iframe>", re.IGNORECASE),
    re.compile(r"<iframe\b", re.IGNORECASE),
    re.compile(r"<object[\s\S]*?>[\s\S]*?</object>", re.IGNORECASE),
    re.compile(r"<embed[\s\S]*?>", re.IGNORECASE),
    re.compile(r"<link[\s\S]*?>", re.IGNORECASE),
    re.compile(r"<meta[\s\S]*?>", re.IGNORECASE),
    re.compile(r"\bon\w+\s*=", re.IGNORECASE),
    re.compile(r"expression\s*\(", re.IGNORECASE),
    re.compile(r"@import", re.IGNORECASE),
    re.compile(r"binding:", re.IGNORECASE),
    re.compile(r"behavior:", re.IGNORECASE),
]

SQL_KEYWORD_PATTERN = re.compile(
    r"\b(union|select|insert|update|delete|drop|create|alter|exec|execute)\b",
    re.IGNORECASE,
)
SQL_PUNCTUATION_PATTERN = re.compile(r"--|/\*|\*/|;")
SQL_BOOLEAN_PATTERN = re.compile(r"\b(or|and)\s+\d+\s*=\s*\d+", re.IGNORECASE)

SPECIAL_CHAR_PATTERN = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
SPECIAL_CHAR_RATIO = 0.3
REPEATED_CHAR_PATTERN = re.compile(r"(.)\1{10,}")

# Removal passes applied by sanitize_user_input, in order
_STRIP_PATTERNS = [
    re.compile(r"<[^>]*>"),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"data:", re.IGNORECASE),
    re.compile(r"\bon\w+\s*=", re.IGNORECASE),
    re.compile(r"expression\s*\(", re.IGNORECASE),
    re.compile(r"@import", re.IGNORECASE),
    re.compile(r"(binding|behavior):", re.IGNORECASE),
]
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_user_input(text: str) -> str:
    """Strip markup, dangerous schemes and control characters

    Removal passes repeat until nothing changes, so nested tokens such as
    ``javajavascript:script:`` cannot reassemble. The result is idempotent.
    """
    cleaned = _CONTROL_CHARS.sub("", text)
    previous = None
    while cleaned != previous:
        previous = cleaned
        for pattern in _STRIP_PATTERNS:
            cleaned = pattern.sub("", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return cleaned[:MAX_MESSAGE_LENGTH].rstrip()


def _looks_like_sql_injection(text: str) -> bool:
    if SQL_BOOLEAN_PATTERN.search(text):
        return True
    return bool(SQL_KEYWORD_PATTERN.search(text) and SQL_PUNCTUATION_PATTERN.search(text))


def validate_user_input(raw) -> ValidationResult:
    """Check a raw message and return a sanitized copy when acceptable"""
    if not isinstance(raw, str) or not raw:
        return ValidationResult(False, "Message must be a non-empty string")

    trimmed = raw.strip()

    if not trimmed:
        return ValidationResult(False, "Message cannot be empty")

    if len(trimmed) > MAX_MESSAGE_LENGTH:
        return ValidationResult(
            False, f"Message exceeds maximum length of {MAX_MESSAGE_LENGTH} characters"
        )

    if len(trimmed) < MIN_MESSAGE_LENGTH:
        return ValidationResult(
            False,
            f"Message is too short. Please provide at least {MIN_MESSAGE_LENGTH} characters",
        )

    for pattern in UNSAFE_PATTERNS:
        if pattern.search(trimmed):
            return ValidationResult(False, "Message contains potentially harmful content")

    if _looks_like_sql_injection(trimmed):
        return ValidationResult(False, "Message contains invalid characters or patterns")

    special_count = len(SPECIAL_CHAR_PATTERN.findall(trimmed))
    if special_count > len(trimmed) * SPECIAL_CHAR_RATIO:
        return ValidationResult(False, "Message contains too many special characters")

    if REPEATED_CHAR_PATTERN.search(trimmed):
        return ValidationResult(False, "Message contains excessive repeated characters")

    sanitized = sanitize_user_input(trimmed)
    if len(sanitized) < MIN_MESSAGE_LENGTH:
        return ValidationResult(
            False,
            f"Message is too short. Please provide at least {MIN_MESSAGE_LENGTH} characters",
        )

    return ValidationResult(True, sanitized=sanitized)
