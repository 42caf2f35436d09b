"""Single-attempt client for the Gemini generateContent API

Every failure leaves this module as an AIServiceException carrying an
ErrorKind, so callers never have to parse provider error text.
"""
import logging

import httpx

import config
from domain.constants import ErrorKind
from domain.errors import AIServiceException
from portfolio.context import build_prompt

logger = logging.getLogger(__name__)

HARM_CATEGORIES = [
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
]

BLOCKED_PREFIX = "Prompt was blocked"


class RemoteAIClient:
    """Issues one outbound generation request per call, with no retries"""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        api_base: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> None:
        self.api_key = config.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or config.GEMINI_MODEL
        self.api_base = (api_base or config.GEMINI_API_BASE).rstrip("/")
        self.timeout = config.AI_TIMEOUT if timeout is None else timeout
        self.temperature = config.AI_TEMPERATURE if temperature is None else temperature
        self.max_tokens = config.AI_MAX_TOKENS if max_tokens is None else max_tokens
        self._http_client = http_client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def build_payload(self, message: str) -> dict:
        return {
            "contents": [{"role": "user", "parts": [{"text": build_prompt(message)}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_tokens,
                "topP": 0.9,
                "topK": 40,
            },
            "safetySettings": [
                {"category": category, "threshold": "BLOCK_NONE"}
                for category in HARM_CATEGORIES
            ],
        }

    async def call(self, message: str) -> str:
        """Generate a reply for an already-sanitized message"""
        if not self.is_configured:
            raise AIServiceException(ErrorKind.INVALID_INPUT, "Gemini API key not configured")

        logger.info("Processing message: %s...", message[:50])
        payload = self.build_payload(message)
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

        try:
            response = await self._post(payload, headers)
        except httpx.TimeoutException as e:
            raise AIServiceException(ErrorKind.TIMEOUT_ERROR, "Request timeout") from e
        except httpx.RequestError as e:
            raise AIServiceException(
                ErrorKind.NETWORK_ERROR, "Network error - please check your connection"
            ) from e

        if response.status_code >= 400:
            raise self._error_for_status(response)

        try:
            data = response.json()
        except ValueError as e:
            raise AIServiceException(ErrorKind.API_ERROR, "Invalid response from AI service") from e

        return self._extract_text(data)

    async def _post(self, payload: dict, headers: dict) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(
                self.endpoint, json=payload, headers=headers, timeout=self.timeout
            )
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(self.endpoint, json=payload, headers=headers)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                return str(error.get("message", ""))
            if error:
                return str(error)
        return response.text

    def _error_for_status(self, response: httpx.Response) -> AIServiceException:
        status = response.status_code
        detail = self._error_message(response)
        logger.warning("Gemini API returned HTTP %s: %s", status, detail[:200])

        if status == 429 or "quota" in detail.lower():
            return AIServiceException(ErrorKind.RATE_LIMIT_ERROR, "Rate limit exceeded")
        if status in (401, 403) or "api key" in detail.lower():
            return AIServiceException(ErrorKind.INVALID_INPUT, "Invalid API key configuration")
        if status >= 500:
            return AIServiceException(
                ErrorKind.SERVICE_UNAVAILABLE, "AI service temporarily unavailable"
            )
        return AIServiceException(ErrorKind.API_ERROR, f"HTTP {status}: {detail or 'Unknown error'}")

    @staticmethod
    def _extract_text(data) -> str:
        if not isinstance(data, dict):
            raise AIServiceException(ErrorKind.API_ERROR, "Invalid response from AI service")

        feedback = data.get("promptFeedback")
        block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        if block_reason:
            raise AIServiceException(ErrorKind.API_ERROR, f"{BLOCKED_PREFIX}: {block_reason}")

        candidates = data.get("candidates") or []
        if not isinstance(candidates, list):
            raise AIServiceException(ErrorKind.API_ERROR, "Invalid response from AI service")
        if not candidates:
            raise AIServiceException(ErrorKind.API_ERROR, "No response received from Gemini API")

        candidate = candidates[0]
        content = candidate.get("content") if isinstance(candidate, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            raise AIServiceException(ErrorKind.API_ERROR, "Empty response from Gemini API")

        text = "".join(
            part["text"] for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        ).strip()
        if not text:
            raise AIServiceException(ErrorKind.API_ERROR, "Empty response from Gemini API")
        return text
