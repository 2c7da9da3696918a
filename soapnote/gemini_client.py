import logging
import os
from typing import Any, Optional

import httpx

from soapnote.errors import EmptyGenerationError, UpstreamError

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"

GENERATION_CONFIG = {
    "temperature": 0.2,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 2048,
}

SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY")
        self.model = model or os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
        self.api_url = (api_url or os.getenv("GEMINI_API_URL", GEMINI_API_URL)).rstrip("/")
        self._transport = transport
        # None disables httpx timeouts; callers bound latency themselves.
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        payload = self._build_payload(prompt)

        logger.info("Calling Gemini model=%s prompt_chars=%d", self.model, len(prompt))
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.endpoint, headers=headers, json=payload)
            except httpx.RequestError as exc:
                logger.warning("Gemini request failed: %s", exc.__class__.__name__)
                raise UpstreamError("Failed to reach Gemini API") from exc

        if not response.is_success:
            message = self._format_error(response)
            logger.warning("Gemini returned HTTP %s", response.status_code)
            raise UpstreamError(message)

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError("Unexpected Gemini response format") from exc

        text = self._extract_text(data)
        if not text:
            raise EmptyGenerationError("No response generated from Gemini API")
        logger.info("Gemini reply received reply_chars=%d", len(text))
        return text

    def _build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": dict(GENERATION_CONFIG),
            "safetySettings": [
                {"category": category, "threshold": "BLOCK_ONLY_HIGH"}
                for category in SAFETY_CATEGORIES
            ],
        }

    def _format_error(self, response: httpx.Response) -> str:
        detail = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                detail = str(error["message"])
        return f"Gemini API error: {detail or response.reason_phrase}"

    def _extract_text(self, data: Any) -> str:
        if not isinstance(data, dict):
            return ""
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return ""
        first = candidates[0]
        if not isinstance(first, dict):
            return ""
        content = first.get("content")
        if not isinstance(content, dict):
            return ""
        parts = content.get("parts")
        if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
            return ""
        text = parts[0].get("text")
        return str(text) if text else ""
