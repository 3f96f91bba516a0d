import logging
from typing import Any, Dict, List, Optional

import requests

from config.settings import AI_TIMEOUT_S, GEMINI_API_KEY, GEMINI_BASE_URL, GEMINI_MODEL
from utils.errors import UpstreamError

logger = logging.getLogger(__name__)

SAFETY_SETTINGS = [
    {"category": category, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]


class GeminiClient:
    """Thin wrapper over the Gemini ``generateContent`` REST call. No retries."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 timeout: Optional[float] = None, base_url: str = GEMINI_BASE_URL):
        self.session = requests.Session()
        self.api_key = GEMINI_API_KEY if api_key is None else api_key
        self.model = model or GEMINI_MODEL
        self.timeout = timeout or AI_TIMEOUT_S
        self.base_url = base_url.rstrip("/")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _endpoint(self) -> str:
        return f"{self.base_url}/{self.model}:generateContent"

    @staticmethod
    def _payload(prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "safetySettings": SAFETY_SETTINGS,
        }

    @staticmethod
    def _extract_text(data: Dict[str, Any]) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            reason = (data.get("promptFeedback") or {}).get("blockReason")
            raise UpstreamError("Failed to generate AI content",
                                details=f"No candidates returned{f' (blocked: {reason})' if reason else ''}")
        parts: List[Dict[str, Any]] = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts)
        if not text.strip():
            finish = candidates[0].get("finishReason", "unknown")
            raise UpstreamError("Failed to generate AI content", details=f"Empty response (finishReason: {finish})")
        return text

    def generate_text(self, prompt: str) -> str:
        if not self.configured:
            raise UpstreamError("Failed to generate AI content", details="GEMINI_API_KEY is not configured")
        try:
            r = self.session.post(
                self._endpoint(),
                params={"key": self.api_key},
                json=self._payload(prompt),
                timeout=self.timeout,
            )
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            logger.error("Gemini request to %s failed: %s", self.model, e)
            raise UpstreamError("Failed to generate AI content", details=str(e)) from e
        except ValueError as e:
            raise UpstreamError("Failed to generate AI content", details=f"Invalid JSON from upstream: {e}") from e
        return self._extract_text(data)
